"""Outbound email interface."""


class EmailSender:
    """Generic outbound email interface.

    Implementations live in the adapter layer. Only application use cases
    send email; domain services never do.
    """

    async def send(self, to: str, subject: str, body: str) -> None:
        """Send a plain text email.

        Args:
            to: Recipient address
            subject: Subject line
            body: Plain text body

        Raises:
            EmailDeliveryError: If the message could not be handed off
        """
        raise NotImplementedError
