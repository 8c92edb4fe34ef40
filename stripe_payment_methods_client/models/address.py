from collections.abc import Mapping
from typing import Any, TypeVar, Union, cast

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ..types import UNSET, Unset

T = TypeVar("T", bound="Address")


@_attrs_define
class Address:
    """
    Attributes:
        city (Union[None, Unset, str]): City, district, suburb, town, or village. Example: San Francisco.
        country (Union[None, Unset, str]): Two-letter country code (ISO 3166-1 alpha-2). Example: US.
        line1 (Union[None, Unset, str]): Address line 1 (e.g., street, PO Box, or company name). Example: 1467.
        line2 (Union[None, Unset, str]): Address line 2 (e.g., apartment, suite, unit, or building). Example: Harrison
            Street.
        postal_code (Union[None, Unset, str]): ZIP or postal code. Example: 94122.
        state (Union[None, Unset, str]): State, county, province, or region. Example: CA.
    """

    city: Union[None, Unset, str] = UNSET
    country: Union[None, Unset, str] = UNSET
    line1: Union[None, Unset, str] = UNSET
    line2: Union[None, Unset, str] = UNSET
    postal_code: Union[None, Unset, str] = UNSET
    state: Union[None, Unset, str] = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        city: Union[None, Unset, str]
        if isinstance(self.city, Unset):
            city = UNSET
        else:
            city = self.city

        country: Union[None, Unset, str]
        if isinstance(self.country, Unset):
            country = UNSET
        else:
            country = self.country

        line1: Union[None, Unset, str]
        if isinstance(self.line1, Unset):
            line1 = UNSET
        else:
            line1 = self.line1

        line2: Union[None, Unset, str]
        if isinstance(self.line2, Unset):
            line2 = UNSET
        else:
            line2 = self.line2

        postal_code: Union[None, Unset, str]
        if isinstance(self.postal_code, Unset):
            postal_code = UNSET
        else:
            postal_code = self.postal_code

        state: Union[None, Unset, str]
        if isinstance(self.state, Unset):
            state = UNSET
        else:
            state = self.state

        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        field_dict.update({})
        if city is not UNSET:
            field_dict["city"] = city
        if country is not UNSET:
            field_dict["country"] = country
        if line1 is not UNSET:
            field_dict["line1"] = line1
        if line2 is not UNSET:
            field_dict["line2"] = line2
        if postal_code is not UNSET:
            field_dict["postal_code"] = postal_code
        if state is not UNSET:
            field_dict["state"] = state

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        d = dict(src_dict)

        def _parse_str(data: object) -> Union[None, Unset, str]:
            if data is None:
                return data
            if isinstance(data, Unset):
                return data
            return cast(Union[None, Unset, str], data)

        city = _parse_str(d.pop("city", UNSET))

        country = _parse_str(d.pop("country", UNSET))

        line1 = _parse_str(d.pop("line1", UNSET))

        line2 = _parse_str(d.pop("line2", UNSET))

        postal_code = _parse_str(d.pop("postal_code", UNSET))

        state = _parse_str(d.pop("state", UNSET))

        address = cls(
            city=city,
            country=country,
            line1=line1,
            line2=line2,
            postal_code=postal_code,
            state=state,
        )

        address.additional_properties = d
        return address

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
