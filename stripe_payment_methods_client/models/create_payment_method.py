from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar, Union, cast

from attrs import define as _attrs_define

from ..models.payment_method_type_filter import PaymentMethodTypeFilter
from ..types import UNSET, Unset

if TYPE_CHECKING:
    from ..models.billing_details import BillingDetails


T = TypeVar("T", bound="CreatePaymentMethod")


@_attrs_define
class CreatePaymentMethod:
    """The generic parameters for creating a payment method.

    Attributes:
        type_ (Union[PaymentMethodTypeFilter, Unset, str]): The type of the PaymentMethod. Types this package does not
            know yet can be given as a plain string.
        billing_details (Union[Unset, BillingDetails]):
        customer (Union[Unset, str]): The Customer to whom the original PaymentMethod is attached. Example:
            cus_NffrFeUfNV2Hib.
        metadata (Union[Unset, dict[str, str]]): Set of key-value pairs that you can attach to an object.
        payment_method (Union[Unset, str]): The PaymentMethod to share. Example: pm_1MqLiJLkdIwHu7ixUEgbFdYF.
        expand (Union[Unset, list[str]]): Specifies which fields in the response should be expanded.
    """

    type_: Union[PaymentMethodTypeFilter, Unset, str] = UNSET
    billing_details: Union[Unset, "BillingDetails"] = UNSET
    customer: Union[Unset, str] = UNSET
    metadata: Union[Unset, dict[str, str]] = UNSET
    payment_method: Union[Unset, str] = UNSET
    expand: Union[Unset, list[str]] = UNSET

    def to_dict(self) -> dict[str, Any]:
        type_: Union[Unset, str]
        if isinstance(self.type_, Unset):
            type_ = UNSET
        elif isinstance(self.type_, PaymentMethodTypeFilter):
            type_ = self.type_.value
        else:
            type_ = self.type_

        billing_details: Union[Unset, dict[str, Any]] = UNSET
        if not isinstance(self.billing_details, Unset):
            billing_details = self.billing_details.to_dict()

        customer = self.customer

        metadata: Union[Unset, dict[str, str]] = UNSET
        if not isinstance(self.metadata, Unset):
            metadata = dict(self.metadata)

        payment_method = self.payment_method

        expand: Union[Unset, list[str]] = UNSET
        if not isinstance(self.expand, Unset):
            expand = list(self.expand)

        field_dict: dict[str, Any] = {}
        field_dict.update({})
        if type_ is not UNSET:
            field_dict["type"] = type_
        if billing_details is not UNSET:
            field_dict["billing_details"] = billing_details
        if customer is not UNSET:
            field_dict["customer"] = customer
        if metadata is not UNSET:
            field_dict["metadata"] = metadata
        if payment_method is not UNSET:
            field_dict["payment_method"] = payment_method
        if expand is not UNSET:
            field_dict["expand"] = expand

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        from ..models.billing_details import BillingDetails

        d = dict(src_dict)

        def _parse_type_(data: object) -> Union[PaymentMethodTypeFilter, Unset, str]:
            if isinstance(data, Unset):
                return data
            try:
                return PaymentMethodTypeFilter(data)
            except ValueError:
                return cast(str, data)

        type_ = _parse_type_(d.pop("type", UNSET))

        _billing_details = d.pop("billing_details", UNSET)
        billing_details: Union[Unset, BillingDetails]
        if isinstance(_billing_details, Unset):
            billing_details = UNSET
        else:
            billing_details = BillingDetails.from_dict(_billing_details)

        customer = d.pop("customer", UNSET)

        metadata = cast(Union[Unset, dict[str, str]], d.pop("metadata", UNSET))

        payment_method = d.pop("payment_method", UNSET)

        expand = cast(Union[Unset, list[str]], d.pop("expand", UNSET))

        create_payment_method = cls(
            type_=type_,
            billing_details=billing_details,
            customer=customer,
            metadata=metadata,
            payment_method=payment_method,
            expand=expand,
        )

        return create_payment_method
