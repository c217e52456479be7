# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#            github.com/dedalus-labs/octoprint-client-python/LICENSE
# ==============================================================================

from __future__ import annotations

from typing import Any

from octoprint_client.mapping import DeserializationConfig, Deserializable, Model, auto_attr
from octoprint_client.types import Location


class Profile(Model):
    bio: str | None = auto_attr(str)
    extra: dict[str, Any] | None = auto_attr(dict)


class Tag:
    def __init__(self, label: str) -> None:
        self.label = label


class Account(Model):
    name: str | None = auto_attr(str)
    display_name: str | None = auto_attr(str)
    heated_bed: bool | None = auto_attr(bool)
    profile: Profile | None = auto_attr(Profile)
    tags: list[Any] | None = auto_attr(list)
    origin: Location | None = auto_attr(Location)
    score: int | None = auto_attr(int)
    extra: dict[str, Any] | None = auto_attr(dict)

    __deserialize__ = (
        DeserializationConfig()
        .nested("profile", Profile)
        .nested("origin", Location)
        .array("tags", Tag)
        .rename(display="display_name")
        .transform(lambda data: data.update(score=len(data.get("name") or "")))
    )


class Plain(Model):
    name: str | None = auto_attr(str)


class Bucketed(Model):
    name: str | None = auto_attr(str)
    leftovers: dict[str, Any] | None = auto_attr(dict)

    __deserialize__ = DeserializationConfig().collect_extras("leftovers")


def test_deserialize_applies_every_step() -> None:
    account = Account.deserialize(
        {
            "name": "Ada",
            "display": "Ada L.",
            "heatedBed": True,
            "profile": {"bio": "Engineer", "website": "ada.dev"},
            "tags": [{"label": "admin"}, "raw"],
            "origin": "sdcard",
            "apiVersion": "1.2",
        }
    )

    assert account.name == "Ada"
    assert account.display_name == "Ada L."
    assert account.heated_bed is True
    assert isinstance(account.profile, Profile)
    assert account.profile.extra == {"website": "ada.dev"}
    assert account.tags[0].label == "admin"
    assert account.tags[1] == "raw"
    assert account.origin is Location.SDCARD
    assert account.score == 3
    assert account.extra == {"api_version": "1.2"}


def test_deserialize_does_not_mutate_input() -> None:
    payload = {"name": "Ada", "display": "A", "unknownKey": 1}

    Account.deserialize(payload)

    assert payload == {"name": "Ada", "display": "A", "unknownKey": 1}


def test_falsy_values_are_kept() -> None:
    account = Account.deserialize({"name": "", "heated_bed": False, "profile": None, "tags": []})

    assert account.heated_bed is False
    assert account.profile is None
    assert account.tags == []


def test_non_mapping_data_is_returned_unchanged() -> None:
    assert Account.deserialize(True) is True
    assert Account.deserialize(None) is None


def test_unknown_enum_value_is_kept_raw() -> None:
    assert Account.deserialize({"origin": "usb"}).origin == "usb"


def test_no_extras_bucket_means_unknown_keys_are_dropped() -> None:
    plain = Plain.deserialize({"name": "x", "other": 1})

    assert plain.name == "x"
    assert not hasattr(plain, "other")


def test_collect_extras_renames_bucket() -> None:
    bucketed = Bucketed.deserialize({"name": "x", "other": 1})

    assert bucketed.leftovers == {"other": 1}


def test_transform_may_return_replacement() -> None:
    class Replaced(Model):
        name: str | None = auto_attr(str)

        __deserialize__ = DeserializationConfig().transform(lambda data: {"name": data["name"].upper()})

    assert Replaced.deserialize({"name": "ada"}).name == "ADA"


def test_helpers_are_usable_directly() -> None:
    data: dict[str, Any] = {"firstName": "Ada", "old": 1, "child": {"bio": "x"}, "items": [{"bio": "y"}, None]}

    Deserializable.convert_camel_case_keys(data)
    Deserializable.rename_keys(data, {"old": "new", "missing": "ignored"})
    Account.deserialize_nested(data, "child", Profile)
    Account.deserialize_array(data, "items", Profile)

    assert data["first_name"] == "Ada"
    assert data["new"] == 1
    assert "ignored" not in data
    assert data["child"] == Profile(bio="x")
    assert data["items"] == [Profile(bio="y"), None]


def test_config_is_fluent() -> None:
    config = DeserializationConfig().rename({"a": "b"}, c="d").nested("x", Profile).array("y", Profile)

    assert config.key_mappings == {"a": "b", "c": "d"}
    assert config.nested_objects == {"x": Profile}
    assert config.array_objects == {"y": Profile}
    assert config.extras_field == "extra"
