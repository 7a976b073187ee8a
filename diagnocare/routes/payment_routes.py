from fastapi import APIRouter, Depends, HTTPException, status

from diagnocare import payments
from diagnocare.auth.dependencies import AuthContext, require_authenticated
from diagnocare.core.exceptions import PaymentProcessorError
from diagnocare.schemas import PaymentIntentRequest, PaymentIntentResponse

router = APIRouter(tags=['payments'])


@router.post('/create-payment-intent', response_model=PaymentIntentResponse)
def create_payment_intent(
    data: PaymentIntentRequest,
    _: AuthContext = Depends(require_authenticated),
):
    try:
        client_secret = payments.create_payment_intent(data.price)
    except PaymentProcessorError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail='Failed to create payment intent',
        ) from exc

    return PaymentIntentResponse(client_secret=client_secret)
