from collections.abc import Mapping
from typing import Any, TypeVar, Union, cast

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ..types import UNSET, Unset

T = TypeVar("T", bound="PaymentMethodCard")


@_attrs_define
class PaymentMethodCard:
    """The card details the API reports back for a card payment method. Never carries the full number or the cvc.

    Attributes:
        brand (Union[None, Unset, str]): Card brand. Example: visa.
        country (Union[None, Unset, str]): Two-letter ISO code representing the country of the card. Example: US.
        exp_month (Union[None, Unset, int]): Two-digit number representing the card's expiration month. Example: 8.
        exp_year (Union[None, Unset, int]): Four-digit number representing the card's expiration year. Example: 2026.
        fingerprint (Union[None, Unset, str]): Uniquely identifies this particular card number. Example:
            mToisGZ01V71BCos.
        funding (Union[None, Unset, str]): Card funding type. Example: credit.
        last4 (Union[None, Unset, str]): The last four digits of the card. Example: 4242.
    """

    brand: Union[None, Unset, str] = UNSET
    country: Union[None, Unset, str] = UNSET
    exp_month: Union[None, Unset, int] = UNSET
    exp_year: Union[None, Unset, int] = UNSET
    fingerprint: Union[None, Unset, str] = UNSET
    funding: Union[None, Unset, str] = UNSET
    last4: Union[None, Unset, str] = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        brand = self.brand

        country = self.country

        exp_month = self.exp_month

        exp_year = self.exp_year

        fingerprint = self.fingerprint

        funding = self.funding

        last4 = self.last4

        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update({})
        if brand is not UNSET:
            field_dict["brand"] = brand
        if country is not UNSET:
            field_dict["country"] = country
        if exp_month is not UNSET:
            field_dict["exp_month"] = exp_month
        if exp_year is not UNSET:
            field_dict["exp_year"] = exp_year
        if fingerprint is not UNSET:
            field_dict["fingerprint"] = fingerprint
        if funding is not UNSET:
            field_dict["funding"] = funding
        if last4 is not UNSET:
            field_dict["last4"] = last4

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        d = dict(src_dict)
        brand = cast(Union[None, Unset, str], d.pop("brand", UNSET))

        country = cast(Union[None, Unset, str], d.pop("country", UNSET))

        exp_month = cast(Union[None, Unset, int], d.pop("exp_month", UNSET))

        exp_year = cast(Union[None, Unset, int], d.pop("exp_year", UNSET))

        fingerprint = cast(Union[None, Unset, str], d.pop("fingerprint", UNSET))

        funding = cast(Union[None, Unset, str], d.pop("funding", UNSET))

        last4 = cast(Union[None, Unset, str], d.pop("last4", UNSET))

        payment_method_card = cls(
            brand=brand,
            country=country,
            exp_month=exp_month,
            exp_year=exp_year,
            fingerprint=fingerprint,
            funding=funding,
            last4=last4,
        )

        payment_method_card.additional_properties = d
        return payment_method_card

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
