import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

from enquiry_api.main import app
from enquiry_api.services.enquiry_service import EnquiryService, get_enquiry_service
from enquiry_api.services.mail_service import MailService
from enquiry_api.tests.constants.enquiries import (
    EnquiryTestConstants,
    MOCK_PROVIDER_RESULT,
)


@pytest.fixture(scope="function")
def mock_mail_service(mocker):
    """Fixture providing a configured mail service whose send_email is mocked."""
    mock = mocker.MagicMock(spec=MailService)
    mock.is_configured = True
    mock.send_email = AsyncMock(return_value=MOCK_PROVIDER_RESULT)
    return mock


@pytest.fixture(scope="function")
def configured_enquiry_service(mock_mail_service):
    """Fixture providing an enquiry service with mail fully configured."""
    return EnquiryService(
        mail=mock_mail_service,
        recipient=EnquiryTestConstants.MOCK_RECIPIENT.value,
        sender=EnquiryTestConstants.MOCK_SENDER.value,
        site_name=EnquiryTestConstants.MOCK_SITE_NAME.value,
        site_title=EnquiryTestConstants.MOCK_SITE_TITLE.value,
    )


@pytest.fixture(scope="function")
def unconfigured_enquiry_service(mock_mail_service):
    """Fixture providing an enquiry service with no destination address."""
    return EnquiryService(
        mail=mock_mail_service,
        recipient=None,
        sender=EnquiryTestConstants.MOCK_SENDER.value,
        site_name=EnquiryTestConstants.MOCK_SITE_NAME.value,
        site_title=EnquiryTestConstants.MOCK_SITE_TITLE.value,
    )


@pytest.fixture(scope="function")
def client():
    """Fixture providing a TestClient against the real application wiring."""
    with TestClient(app) as c:
        yield c


@pytest.fixture(scope="function")
def lenient_client():
    """Fixture providing a TestClient that returns 500 responses instead of raising."""
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


@pytest.fixture(scope="function")
def enquiry_client(configured_enquiry_service):
    """Fixture providing a TestClient with the enquiry service overridden."""
    app.dependency_overrides[get_enquiry_service] = lambda: configured_enquiry_service

    with TestClient(app) as c:
        yield c

    # Clean up overrides after the test finished
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def unconfigured_enquiry_client(unconfigured_enquiry_service):
    """Fixture providing a TestClient whose enquiry service cannot send mail."""
    app.dependency_overrides[get_enquiry_service] = lambda: unconfigured_enquiry_service

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()
