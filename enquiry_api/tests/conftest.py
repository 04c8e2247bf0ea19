from enquiry_api.tests.fixtures.enquiries import *
from enquiry_api.tests.fixtures.mail import *
