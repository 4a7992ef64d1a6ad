from dataclasses import dataclass

from schemanorm.config import SchemanormConfig


@dataclass
class Data:
    config: SchemanormConfig

    __slots__ = ("config",)
