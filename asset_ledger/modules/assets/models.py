"""Domain models for ledger assets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

# Stored records are schema-free JSON objects; only ``ID`` is guaranteed.
AssetRecord = dict[str, Any]

ASSET_DOC_TYPE = "asset"


@dataclass(frozen=True, slots=True)
class DecodedRecord:
    value: Any

    def to_json(self) -> Any:
        return self.value


@dataclass(frozen=True, slots=True)
class RawRecord:
    """Stored value that could not be decoded as JSON, kept as text."""

    text: str

    def to_json(self) -> Any:
        return self.text


@dataclass(frozen=True, slots=True)
class AssetQueryResult:
    key: str
    record: Union[DecodedRecord, RawRecord]

    def to_dict(self) -> dict[str, Any]:
        return {"Key": self.key, "Record": self.record.to_json()}


SEED_ASSETS: tuple[AssetRecord, ...] = (
    {
        "ID": "1",
        "first_name": "Car",
        "last_name": "Gartsyde",
        "address": "95626 American Ash Point",
        "email": "cgartsyde0@scribd.com",
        "gender": "Genderqueer",
        "blood_group": "A+",
        "phone_number": "339-670-2138",
        "emergency_phone_number": "393-775-9395",
    },
    {
        "ID": "2",
        "first_name": "Barrett",
        "last_name": "Parkinson",
        "address": "56140 Mayfield Place",
        "email": "bparkinson1@wsj.com",
        "gender": "Male",
        "blood_group": "A+",
        "phone_number": "166-680-3331",
        "emergency_phone_number": "881-251-8670",
    },
    {
        "ID": "3",
        "first_name": "Jeanna",
        "last_name": "Van den Velden",
        "address": "707 Jenifer Drive",
        "email": "jvandenvelden2@biblegateway.com",
        "gender": "Bigender",
        "blood_group": "A+",
        "phone_number": "634-968-8846",
        "emergency_phone_number": "300-692-4657",
    },
    {
        "ID": "4",
        "first_name": "Jabez",
        "last_name": "Giron",
        "address": "706 Roth Junction",
        "email": "jgiron3@patch.com",
        "gender": "Genderqueer",
        "blood_group": "A+",
        "phone_number": "627-973-9495",
        "emergency_phone_number": "565-502-1174",
    },
    {
        "ID": "5",
        "first_name": "Mycah",
        "last_name": "MacAndrew",
        "address": "86 Mosinee Crossing",
        "email": "mmacandrew4@gov.uk",
        "gender": "Non-binary",
        "blood_group": "A+",
        "phone_number": "937-327-9051",
        "emergency_phone_number": "924-402-0542",
    },
    {
        "ID": "6",
        "first_name": "Saunder",
        "last_name": "Cranston",
        "address": "250 Moose Court",
        "email": "scranston5@goo.ne.jp",
        "gender": "Male",
        "blood_group": "A+",
        "phone_number": "254-219-9419",
        "emergency_phone_number": "502-925-9980",
    },
    {
        "ID": "7",
        "first_name": "Mignonne",
        "last_name": "Messom",
        "address": "25440 Rigney Court",
        "email": "mmessom6@qq.com",
        "gender": "Polygender",
        "blood_group": "A+",
        "phone_number": "414-796-5707",
        "emergency_phone_number": "593-170-2663",
    },
    {
        "ID": "8",
        "first_name": "Wilow",
        "last_name": "Culshaw",
        "address": "27934 Grayhawk Drive",
        "email": "wculshaw7@wufoo.com",
        "gender": "Bigender",
        "blood_group": "A+",
        "phone_number": "696-839-8069",
        "emergency_phone_number": "799-347-1967",
    },
    {
        "ID": "9",
        "first_name": "Grete",
        "last_name": "Broseke",
        "address": "76498 Hallows Alley",
        "email": "gbroseke8@tuttocitta.it",
        "gender": "Genderfluid",
        "blood_group": "A+",
        "phone_number": "426-263-5140",
        "emergency_phone_number": "124-533-6845",
    },
    {
        "ID": "10",
        "first_name": "Amandi",
        "last_name": "Stoppard",
        "address": "27 Donald Crossing",
        "email": "astoppard9@bandcamp.com",
        "gender": "Non-binary",
        "blood_group": "A+",
        "phone_number": "936-820-9485",
        "emergency_phone_number": "277-646-9288",
    },
)
