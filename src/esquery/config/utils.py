from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, cast

from pydantic import BaseModel
from pydantic_core import PydanticUndefinedType
from pydantic_settings import BaseSettings
from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap

from esquery.types.general import JsonSerializable

yaml = YAML()
CommentedSerializable = JsonSerializable | list[CommentedMap] | dict[str, CommentedMap]


class CommentedSettings(BaseSettings):
    """Pydantic BaseSettings with support for yaml output with comment."""

    @staticmethod
    def recurse_common_types(obj: Any) -> CommentedSerializable | CommentedMap:
        """Recursively ensure an object is able to be dumped to yaml."""
        if isinstance(obj, BaseModel) or hasattr(obj, "model_fields"):
            return CommentedSettings.to_commented(obj)
        if isinstance(obj, str) or not isinstance(obj, Iterable | Mapping):
            if isinstance(obj, None | int | float | bool):
                return obj
            return str(obj)
        if not isinstance(obj, Mapping):
            return [CommentedSettings.recurse_common_types(o) for o in obj]
        return {
            str(key): CommentedSettings.recurse_common_types(value)  # pyright:ignore[reportUnknownArgumentType]
            for key, value in obj.items()  # pyright:ignore[reportUnknownVariableType]
        }

    @staticmethod
    def to_commented(obj: BaseModel | type[BaseModel]) -> CommentedMap:
        """Recursively populate a commented mapping from a BaseModel."""
        commented = CommentedMap()
        is_basemodel = isinstance(obj, BaseModel)
        model_cls = type(obj) if is_basemodel else obj
        if is_basemodel:
            items = cast(BaseModel, obj).__dict__.items()
        else:
            items = (
                (name, info.get_default(call_default_factory=True))
                for name, info in model_cls.model_fields.items()
            )

        for field, value in items:
            if isinstance(value, PydanticUndefinedType):
                continue
            if isinstance(value, BaseModel):
                adjusted_value = CommentedSettings.to_commented(value)
            else:
                adjusted_value = CommentedSettings.recurse_common_types(value)

            commented[field] = adjusted_value
            if desc := model_cls.model_fields[field].description:
                commented.yaml_add_eol_comment(comment=desc, key=field)  # pyright:ignore[reportUnknownMemberType]

        return commented

    @classmethod
    def write_default(cls, path: Path) -> None:
        """Write the settings defaults to a given path."""
        start_comment = "\n".join(
            [
                "Default configuration values.",
                "Managed by esquery.",
                "Don't edit this file, it will be overwritten.",
                "Edit the appropriate config file instead.",
            ]
        )
        commented = CommentedSettings.to_commented(cls)

        commented.yaml_set_start_comment(start_comment)  # pyright:ignore[reportUnknownMemberType] ruamel uses unknowns
        path.parent.mkdir(parents=True, exist_ok=True)
        yaml.dump(commented, path)  # pyright:ignore[reportUnknownMemberType] ruamel uses unknowns
