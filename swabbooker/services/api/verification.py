"""SMS verification endpoints."""

from urllib.parse import quote

from .models import SmsVerification
from .transport import ApiTransport, build_query


class SmsVerificationApi:
    """Proves phone ownership with a one-time SMS code."""

    def __init__(self, transport: ApiTransport):
        self._transport = transport

    async def request_code(self, phone: str, lang: str, portal: str) -> None:
        """
        Ask the API to send a verification SMS.

        Args:
            phone: Mobile phone number
            lang: Language of the SMS text
            portal: Organization/portal identifier
        """
        params = {"phone": phone, "lang": lang, "portal": portal}
        await self._transport.post(f"/smstokens/requestnew?{build_query(params)}")

    async def validate_code(self, code: str, phone: str) -> SmsVerification:
        """
        Validate the code the user received.

        Args:
            code: Code from the SMS
            phone: Mobile phone number the code was sent to

        Returns:
            SmsVerification carrying the verification id

        Raises:
            ResponseShapeError: If the response has no tokenId
        """
        path = f"/smstokens/validate/{quote(code, safe='')}?{build_query({'phone': phone})}"
        return SmsVerification.from_api(await self._transport.get(path), path)
