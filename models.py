"""
ORM Models

Player 是唯一持久化的實體；Race / Profession / PlayerOrder 是封閉的列舉
"""
from sqlalchemy import Column, Integer, String, DateTime, Boolean, Enum as SQLEnum
from enum import Enum

from database import Base
from services.level_service import calculate_level, calculate_until_next_level
from services.time_service import datetime_to_millis, millis_to_datetime


class Race(str, Enum):
    HUMAN = "HUMAN"
    DWARF = "DWARF"
    ELF = "ELF"
    GIANT = "GIANT"
    ORC = "ORC"
    TROLL = "TROLL"
    HOBBIT = "HOBBIT"
    GNOME = "GNOME"


class Profession(str, Enum):
    WARRIOR = "WARRIOR"
    ROGUE = "ROGUE"
    SORCERER = "SORCERER"
    CLERIC = "CLERIC"
    CLERK = "CLERK"
    KNIGHT = "KNIGHT"
    PALADIN = "PALADIN"
    NATURALIST = "NATURALIST"
    NAZGUL = "NAZGUL"
    WARLOCK = "WARLOCK"
    DRUID = "DRUID"


class PlayerOrder(str, Enum):
    """列表排序方式，沒有 _DESC 後綴的都是升冪"""
    ID = "ID"
    ID_DESC = "ID_DESC"
    NAME = "NAME"
    NAME_DESC = "NAME_DESC"
    EXPERIENCE = "EXPERIENCE"
    EXPERIENCE_DESC = "EXPERIENCE_DESC"
    BIRTHDAY = "BIRTHDAY"
    BIRTHDAY_DESC = "BIRTHDAY_DESC"
    LEVEL = "LEVEL"
    LEVEL_DESC = "LEVEL_DESC"

    @property
    def field_name(self) -> str:
        return self.value.removesuffix("_DESC").lower()

    @property
    def descending(self) -> bool:
        return self.value.endswith("_DESC")


class Player(Base):
    __tablename__ = "player"
    # AUTOINCREMENT：SQLite 不會重用已刪除的 id
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(12), index=True)
    title = Column(String(30))
    race = Column(SQLEnum(Race), index=True)
    profession = Column(SQLEnum(Profession), index=True)

    # level / until_next_level 只能透過 set_experience() 一起寫入
    experience = Column(Integer, nullable=False, index=True)
    level = Column(Integer, nullable=False, index=True)
    until_next_level = Column("untilnextlevel", Integer, nullable=False)

    birthday = Column(DateTime, index=True)
    banned = Column(Boolean, nullable=False, default=False, index=True)

    def set_experience(self, experience: int) -> None:
        """設定經驗值，同時重新計算 level 與 until_next_level"""
        self.experience = experience
        self.level = calculate_level(experience)
        self.until_next_level = calculate_until_next_level(experience)

    @property
    def birthday_millis(self):
        if self.birthday is None:
            return None
        return datetime_to_millis(self.birthday)

    @birthday_millis.setter
    def birthday_millis(self, millis):
        self.birthday = None if millis is None else millis_to_datetime(millis)

    def __repr__(self):
        return f"<Player(id={self.id}, name='{self.name}', level={self.level})>"
