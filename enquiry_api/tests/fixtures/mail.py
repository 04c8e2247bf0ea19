import pytest
from unittest.mock import AsyncMock

from enquiry_api.models.enquiry import EmailMessage
from enquiry_api.services.mail_service import MailService
from enquiry_api.tests.constants.enquiries import EnquiryTestConstants


@pytest.fixture(scope="function")
def mock_mail_httpx_client_post(mocker):
    """Fixture to patch and provide a mock for the httpx client used by mail_service."""
    mock = mocker.patch(
        "enquiry_api.services.mail_service.httpx.AsyncClient.post",
        new_callable=AsyncMock,
    )
    return mock


@pytest.fixture(scope="function")
def resend_mail_service():
    """Fixture providing a mail service pointed at a fake provider URL."""
    return MailService(
        api_key=EnquiryTestConstants.MOCK_API_KEY.value,
        api_url=EnquiryTestConstants.MOCK_API_URL.value,
        timeout=5,
    )


@pytest.fixture(scope="function")
def email_message():
    """Fixture providing a minimal notification email."""
    return EmailMessage(
        sender=EnquiryTestConstants.MOCK_SENDER.value,
        to=EnquiryTestConstants.MOCK_RECIPIENT.value,
        subject="New Nsagu Park enquiry – tenant – Jo",
        text="New Nsagu Industrial Park enquiry",
        html="<h2>New Nsagu Industrial Park enquiry</h2>",
    )
