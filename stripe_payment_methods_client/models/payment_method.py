import datetime
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar, Union, cast

from attrs import define as _attrs_define
from attrs import field as _attrs_field
from dateutil.parser import isoparse
from dateutil.tz import tzutc

from ..models.payment_method_type_filter import PaymentMethodTypeFilter
from ..types import UNSET, Unset

if TYPE_CHECKING:
    from ..models.billing_details import BillingDetails
    from ..models.payment_method_card import PaymentMethodCard


T = TypeVar("T", bound="PaymentMethod")


@_attrs_define
class PaymentMethod:
    """A stored payment instrument, as returned by the payment method endpoints.

    Attributes:
        id (str): Unique identifier for the object. Example: pm_1MqLiJLkdIwHu7ixUEgbFdYF.
        object_ (str): String representing the object's type. Example: payment_method.
        type_ (Union[PaymentMethodTypeFilter, str]): The type of the PaymentMethod. Types this client does not know
            about are kept as plain strings.
        created (datetime.datetime): Time at which the object was created. Sent as seconds since the Unix epoch.
        livemode (bool): Whether the object exists in live mode or in test mode.
        customer (Union[None, Unset, str]): The ID of the Customer to which this PaymentMethod is saved. Example:
            cus_NffrFeUfNV2Hib.
        billing_details (Union[Unset, BillingDetails]):
        card (Union['PaymentMethodCard', None, Unset]):
        metadata (Union[None, Unset, dict[str, str]]): Set of key-value pairs attached to the object.
    """

    id: str
    object_: str
    type_: Union[PaymentMethodTypeFilter, str]
    created: datetime.datetime
    livemode: bool
    customer: Union[None, Unset, str] = UNSET
    billing_details: Union[Unset, "BillingDetails"] = UNSET
    card: Union["PaymentMethodCard", None, Unset] = UNSET
    metadata: Union[None, Unset, dict[str, str]] = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        from ..models.payment_method_card import PaymentMethodCard

        id = self.id

        object_ = self.object_

        type_: str
        if isinstance(self.type_, PaymentMethodTypeFilter):
            type_ = self.type_.value
        else:
            type_ = self.type_

        created = int(self.created.timestamp())

        livemode = self.livemode

        customer = self.customer

        billing_details: Union[Unset, dict[str, Any]] = UNSET
        if not isinstance(self.billing_details, Unset):
            billing_details = self.billing_details.to_dict()

        card: Union[None, Unset, dict[str, Any]]
        if isinstance(self.card, Unset):
            card = UNSET
        elif isinstance(self.card, PaymentMethodCard):
            card = self.card.to_dict()
        else:
            card = self.card

        metadata: Union[None, Unset, dict[str, str]]
        if isinstance(self.metadata, Unset):
            metadata = UNSET
        elif isinstance(self.metadata, dict):
            metadata = dict(self.metadata)
        else:
            metadata = self.metadata

        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update(
            {
                "id": id,
                "object": object_,
                "type": type_,
                "created": created,
                "livemode": livemode,
            }
        )
        if customer is not UNSET:
            field_dict["customer"] = customer
        if billing_details is not UNSET:
            field_dict["billing_details"] = billing_details
        if card is not UNSET:
            field_dict["card"] = card
        if metadata is not UNSET:
            field_dict["metadata"] = metadata

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        from ..models.billing_details import BillingDetails
        from ..models.payment_method_card import PaymentMethodCard

        d = dict(src_dict)
        id = d.pop("id")

        object_ = d.pop("object")

        def _parse_type_(data: str) -> Union[PaymentMethodTypeFilter, str]:
            try:
                return PaymentMethodTypeFilter(data)
            except ValueError:
                return data

        type_ = _parse_type_(d.pop("type"))

        def _parse_created(data: object) -> datetime.datetime:
            if isinstance(data, str):
                parsed = isoparse(data)
                if parsed.tzinfo is None:
                    parsed = parsed.replace(tzinfo=tzutc())
                return parsed
            if isinstance(data, bool) or not isinstance(data, (int, float)):
                raise TypeError(f"created must be a unix timestamp, got {data!r}")
            return datetime.datetime.fromtimestamp(data, tz=tzutc())

        created = _parse_created(d.pop("created"))

        livemode = d.pop("livemode")

        customer = cast(Union[None, Unset, str], d.pop("customer", UNSET))

        _billing_details = d.pop("billing_details", UNSET)
        billing_details: Union[Unset, BillingDetails]
        if isinstance(_billing_details, Unset):
            billing_details = UNSET
        else:
            billing_details = BillingDetails.from_dict(_billing_details)

        def _parse_card(data: object) -> Union["PaymentMethodCard", None, Unset]:
            if data is None:
                return data
            if isinstance(data, Unset):
                return data
            if not isinstance(data, dict):
                raise TypeError(f"card must be an object, got {data!r}")
            return PaymentMethodCard.from_dict(data)

        card = _parse_card(d.pop("card", UNSET))

        metadata = cast(Union[None, Unset, dict[str, str]], d.pop("metadata", UNSET))

        payment_method = cls(
            id=id,
            object_=object_,
            type_=type_,
            created=created,
            livemode=livemode,
            customer=customer,
            billing_details=billing_details,
            card=card,
            metadata=metadata,
        )

        payment_method.additional_properties = d
        return payment_method

    @property
    def additional_keys(self) -> list[str]:
        return list(self.additional_properties.keys())

    def __getitem__(self, key: str) -> Any:
        return self.additional_properties[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.additional_properties[key] = value

    def __delitem__(self, key: str) -> None:
        del self.additional_properties[key]

    def __contains__(self, key: str) -> bool:
        return key in self.additional_properties
