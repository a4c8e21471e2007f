# File: robots_forge/config.py
"""
Модуль для загрузки и валидации файла набора правил robots.txt.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from robots_forge.models import ALL_BOTS, Permission, RobotRule, Sitemap, normalize_bots
from robots_forge.ruleset import RuleSet
from robots_forge.templates import TEMPLATES, get_template


class RuleConfig(BaseModel):
    """Одно правило в файле конфигурации."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    bot: list[str] = Field(default_factory=lambda: [ALL_BOTS], description="Целевые боты или All.")
    path: str = Field(..., min_length=1, description="Шаблон пути (*, $ поддерживаются).")
    permission: Permission = Field(..., description="allow или disallow.")
    comment: Optional[str] = Field(None, max_length=200, description="Комментарий к правилу.")

    @field_validator("bot", mode="before")
    def _bot_as_list(cls, v: Any) -> Any:
        if isinstance(v, str):
            return [v]
        return v

    @field_validator("path")
    def _path_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Path cannot be empty")
        return v.strip()

    def to_rule(self) -> RobotRule:
        return RobotRule(
            path=self.path,
            permission=self.permission,
            bot=normalize_bots(self.bot),
            comment=self.comment,
        )


class RuleSetConfig(BaseModel):
    """Описание набора правил: шаблон, правила, sitemap-ссылки."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    template: Optional[str] = Field(None, description="Id шаблона, правила которого идут первыми.")
    rules: list[RuleConfig] = Field(default_factory=list, description="Правила в порядке вывода.")
    sitemaps: list[str] = Field(default_factory=list, description="URL sitemap-файлов.")
    target_bot: str = Field(ALL_BOTS, min_length=1, description="Бот по умолчанию для проверки URL.")

    @field_validator("template")
    def _known_template(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and v not in TEMPLATES:
            raise ValueError(f"Unknown template: {v}")
        return v

    def to_ruleset(self) -> RuleSet:
        """Собирает RuleSet: сначала правила шаблона, затем правила из файла."""
        rules = get_template(self.template).build_rules() if self.template else []
        rules.extend(rule.to_rule() for rule in self.rules)
        return RuleSet(rules=rules, sitemaps=[Sitemap(url=url) for url in self.sitemaps])


DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> RuleSetConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект RuleSetConfig.
    При отсутствии файла бросает FileNotFoundError.
    """
    if path is None:
        if not DEFAULT_CFG.exists():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(DEFAULT_CFG))
        path_obj = DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    return RuleSetConfig(**data)


__all__ = ["RuleConfig", "RuleSetConfig", "load_config", "DEFAULT_CFG"]
