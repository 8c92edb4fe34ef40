"""Contains all the data models used in inputs/outputs"""

from .address import Address
from .api_error_detail import ApiErrorDetail
from .attach_payment_method import AttachPaymentMethod
from .billing_details import BillingDetails
from .create_payment_method import CreatePaymentMethod
from .create_payment_method_with_card import CreatePaymentMethodWithCard
from .payment_card import PaymentCard
from .payment_method import PaymentMethod
from .payment_method_card import PaymentMethodCard
from .payment_method_type_filter import PaymentMethodTypeFilter
from .update_payment_method import UpdatePaymentMethod
from .update_payment_method_with_card import UpdatePaymentMethodWithCard

__all__ = (
    "Address",
    "ApiErrorDetail",
    "AttachPaymentMethod",
    "BillingDetails",
    "CreatePaymentMethod",
    "CreatePaymentMethodWithCard",
    "PaymentCard",
    "PaymentMethod",
    "PaymentMethodCard",
    "PaymentMethodTypeFilter",
    "UpdatePaymentMethod",
    "UpdatePaymentMethodWithCard",
)
