"""Pydantic model of one corpus row, keyed by the source (Russian) headers."""

from __future__ import annotations

from types import MappingProxyType
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

from pragmaticon.domain.model import FieldName

SOURCE_HEADERS: Final = MappingProxyType(
    {
        "ДФ": FieldName.UNIT,
        "требуется продолжение": FieldName.EXTREQUIRED,
        "основная семантика": FieldName.SEMANTICS1,
        "дополнительная семантика": FieldName.SEMANTICS,
        "речевой акт 1 (для трехчастных)": FieldName.ACT1,
        "тип речевого акта (собеседник)": FieldName.ACTCLASS,
        "о ситуации": FieldName.SITUATION,
        "структура": FieldName.PARTS,
        "интонация": FieldName.INTONATION,
        "продолжение": FieldName.EXTENSION,
        "модификации": FieldName.MODS,
        "жестикуляция": FieldName.GEST,
        "активный орган": FieldName.ORGAN,
        "переводные аналоги": FieldName.TRANSLATIONS,
        "Примеры": FieldName.EXAMPLES,
        "Аудио": FieldName.AUDIO,
        "Видео": FieldName.VIDEO,
        "уст.|груб.|нейтр.": FieldName.STYLE,
        "Комментарий": FieldName.COMMENT,
        "конструкция": FieldName.CONSTRUCTION,
        "ссылка на конструктикон": FieldName.LINK,
    }
)

HEADER_FOR_FIELD: Final = MappingProxyType(
    {field: header for header, field in SOURCE_HEADERS.items()}
)


def canonical_header(cell: str) -> str:
    return cell.strip().lstrip("\ufeff")


def field_for_header(header: str) -> FieldName | None:
    return SOURCE_HEADERS.get(canonical_header(header))


class CorpusRowPayload(BaseModel):
    """Raw cell values of one row; absent columns stay unset, values are not trimmed."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    unit: str | None = Field(default=None, alias=HEADER_FOR_FIELD[FieldName.UNIT])
    extrequired: str | None = Field(default=None, alias=HEADER_FOR_FIELD[FieldName.EXTREQUIRED])
    semantics1: str | None = Field(default=None, alias=HEADER_FOR_FIELD[FieldName.SEMANTICS1])
    semantics: str | None = Field(default=None, alias=HEADER_FOR_FIELD[FieldName.SEMANTICS])
    act1: str | None = Field(default=None, alias=HEADER_FOR_FIELD[FieldName.ACT1])
    actclass: str | None = Field(default=None, alias=HEADER_FOR_FIELD[FieldName.ACTCLASS])
    situation: str | None = Field(default=None, alias=HEADER_FOR_FIELD[FieldName.SITUATION])
    parts: str | None = Field(default=None, alias=HEADER_FOR_FIELD[FieldName.PARTS])
    intonation: str | None = Field(default=None, alias=HEADER_FOR_FIELD[FieldName.INTONATION])
    extension: str | None = Field(default=None, alias=HEADER_FOR_FIELD[FieldName.EXTENSION])
    mods: str | None = Field(default=None, alias=HEADER_FOR_FIELD[FieldName.MODS])
    gest: str | None = Field(default=None, alias=HEADER_FOR_FIELD[FieldName.GEST])
    organ: str | None = Field(default=None, alias=HEADER_FOR_FIELD[FieldName.ORGAN])
    translations: str | None = Field(default=None, alias=HEADER_FOR_FIELD[FieldName.TRANSLATIONS])
    examples: str | None = Field(default=None, alias=HEADER_FOR_FIELD[FieldName.EXAMPLES])
    audio: str | None = Field(default=None, alias=HEADER_FOR_FIELD[FieldName.AUDIO])
    video: str | None = Field(default=None, alias=HEADER_FOR_FIELD[FieldName.VIDEO])
    style: str | None = Field(default=None, alias=HEADER_FOR_FIELD[FieldName.STYLE])
    comment: str | None = Field(default=None, alias=HEADER_FOR_FIELD[FieldName.COMMENT])
    construction: str | None = Field(default=None, alias=HEADER_FOR_FIELD[FieldName.CONSTRUCTION])
    link: str | None = Field(default=None, alias=HEADER_FOR_FIELD[FieldName.LINK])

    def as_fields(self) -> dict[FieldName, str]:
        """Return the cells that were present in the row, keyed by canonical field."""

        values: dict[FieldName, str] = {}
        for name in self.model_fields_set:
            value = getattr(self, name)
            if value is not None:
                values[FieldName(name)] = value
        return values
