"""Recording the outcome of a PayPal capture: commands and handler."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from groove.domain import groove
from groove.payments.payment.payment import Payment


@groove.command(part_of="Payment")
class RecordCapture:
    payment_id = Identifier(required=True)
    capture_id = String(max_length=255)


@groove.command(part_of="Payment")
class RecordCaptureFailure:
    payment_id = Identifier(required=True)
    reason = String(max_length=500)


@groove.command_handler(part_of=Payment)
class PaymentCaptureHandler:
    @handle(RecordCapture)
    def record_capture(self, command):
        repo = current_domain.repository_for(Payment)
        payment = repo.get(command.payment_id)
        payment.record_capture(command.capture_id)
        repo.add(payment)

    @handle(RecordCaptureFailure)
    def record_capture_failure(self, command):
        repo = current_domain.repository_for(Payment)
        payment = repo.get(command.payment_id)
        payment.record_failure(command.reason)
        repo.add(payment)
