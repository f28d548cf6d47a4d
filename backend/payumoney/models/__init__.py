from .payments import PaymentParameters, PaymentRedirect

__all__ = ["PaymentParameters", "PaymentRedirect"]
