from __future__ import annotations

import configparser
import dataclasses
import math
import typing


__all__ = [
    "Config",
]

AngleUnit = typing.Literal["radians", "degrees"]


@dataclasses.dataclass
class Config:
    """Configuration for the vec2d command line tool."""
    angles_unit: AngleUnit = "radians"
    angles_legacy_grouping: bool = False

    output_show_repr: bool = False

    @classmethod
    def from_file(cls, file) -> "Config":
        cp = configparser.ConfigParser()
        cp.read_file(file)

        defaults = cls()

        config = cls(
            angles_unit=cp.get("angles", "unit", fallback=defaults.angles_unit),
            angles_legacy_grouping=cp.getboolean("angles", "legacy-grouping",
                                                 fallback=defaults.angles_legacy_grouping),

            output_show_repr=cp.getboolean("output", "show-repr", fallback=defaults.output_show_repr),
        )
        config.validate()

        return config

    @classmethod
    def from_filepath(cls, filepath: str) -> "Config":
        with open(filepath) as f:
            return cls.from_file(f)

    def to_radians(self, angle: float) -> float:
        """Convert an angle given in the configured unit to radians."""
        if self.angles_unit == "radians":
            return angle
        elif self.angles_unit == "degrees":
            return math.radians(angle)

        raise ValueError(f"Unknown angle unit {self.angles_unit!r}. Use 'radians' or 'degrees'.")

    def from_radians(self, angle: float) -> float:
        """Convert an angle in radians to the configured unit."""
        if self.angles_unit == "radians":
            return angle
        elif self.angles_unit == "degrees":
            return math.degrees(angle)

        raise ValueError(f"Unknown angle unit {self.angles_unit!r}. Use 'radians' or 'degrees'.")

    def validate(self):
        if self.angles_unit not in typing.get_args(AngleUnit):
            raise ValueError(f"Unknown angle unit {self.angles_unit!r}. Use 'radians' or 'degrees'.")

    @staticmethod
    def value_to_str(value: bool | str) -> str:
        if isinstance(value, bool):
            return str(value).lower()
        else:
            return str(value)

    @staticmethod
    def value_from_str(value: str, type_: str) -> bool | str:
        """Parse an override value. Booleans accept the same spellings as the config file."""
        if type_ == "bool":
            try:
                return configparser.ConfigParser.BOOLEAN_STATES[value.lower()]
            except KeyError as e:
                raise ValueError(f"Not a boolean: {value!r}.") from e
        else:
            return value

    @staticmethod
    def get_section_and_key(attribute_name: str) -> tuple[str, str]:
        """Split an attribute name into the config header name and the key name."""

        section, key = attribute_name.split("_", 1)

        return section, key.replace("_", "-")

    @staticmethod
    def get_attribute_name(section: str, key: str) -> str:
        return f"{section}_{key.replace('-', '_')}"

    @classmethod
    def get_field_type(cls, field_name: str) -> str:
        field_types = {f.name: f.type for f in dataclasses.fields(cls)}
        return field_types[field_name]

    def import_option(self, section: str, key: str, value: str):
        field_name = self.get_attribute_name(section, key)
        field_type = self.get_field_type(field_name)

        setattr(self, field_name, self.value_from_str(value, field_type))
