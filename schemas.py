"""
Pydantic Schemas：API 的輸入 / 輸出格式

只做形狀（型別、列舉）驗證；業務規則在 services/validation_service.py
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from models import Player, Race, Profession


class PlayerRequest(BaseModel):
    """
    建立 / 更新玩家的 payload

    所有欄位都是 optional：
    - 建立時 name / birthday / experience 必填（由 validation_service 檢查）
    - 更新時只覆蓋有提供的欄位
    """
    name: Optional[str] = None
    title: Optional[str] = None
    race: Optional[Race] = None
    profession: Optional[Profession] = None
    birthday: Optional[int] = Field(default=None, description="epoch milliseconds")
    banned: Optional[bool] = None
    experience: Optional[int] = None


class PlayerResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: Optional[str] = None
    title: Optional[str] = None
    race: Optional[Race] = None
    profession: Optional[Profession] = None
    experience: int
    level: int
    until_next_level: int = Field(alias="untilNextLevel")
    birthday: Optional[int] = Field(default=None, description="epoch milliseconds")
    banned: bool

    @classmethod
    def from_player(cls, player: Player) -> "PlayerResponse":
        return cls(
            id=player.id,
            name=player.name,
            title=player.title,
            race=player.race,
            profession=player.profession,
            experience=player.experience,
            level=player.level,
            until_next_level=player.until_next_level,
            birthday=player.birthday_millis,
            banned=player.banned,
        )
