"""
驗證服務：檢查玩家資料是否合法

純計算邏輯，不涉及資料庫

規則（依序檢查，第一個失敗就停止）：
1. name 若存在，長度 <= 12
2. title 若存在，長度 <= 30
3. birthday 若存在，必須介於 2000-01-01 與 3000-12-31 之間（不含邊界）
4. experience 必須存在，且在 [0, 10_000_000) 範圍內

race / profession 的合法性由 schema（Enum）在解碼階段保證
"""
from typing import Optional

from core.exceptions import InvalidPlayerData
from schemas import PlayerRequest
from services.time_service import BIRTHDAY_MIN, BIRTHDAY_MAX

NAME_MAX_LENGTH = 12
TITLE_MAX_LENGTH = 30
EXPERIENCE_MIN = 0
EXPERIENCE_MAX = 10_000_000


def validate_player_data(
    name: Optional[str],
    title: Optional[str],
    birthday: Optional[int],
    experience: Optional[int],
) -> None:
    """
    驗證玩家資料，失敗時拋出 InvalidPlayerData

    參數：
        name: 玩家名稱
        title: 稱號
        birthday: 生日（epoch ms）
        experience: 經驗值

    異常：
        InvalidPlayerData: 任何一條規則不通過（訊息說明原因）
    """
    if name is not None and len(name) > NAME_MAX_LENGTH:
        raise InvalidPlayerData(f"name must be at most {NAME_MAX_LENGTH} characters")

    if title is not None and len(title) > TITLE_MAX_LENGTH:
        raise InvalidPlayerData(f"title must be at most {TITLE_MAX_LENGTH} characters")

    if birthday is not None and not (BIRTHDAY_MIN < birthday < BIRTHDAY_MAX):
        raise InvalidPlayerData("birthday must be between 2000-01-01 and 3000-12-31")

    if experience is None:
        raise InvalidPlayerData("experience is required")

    if not (EXPERIENCE_MIN <= experience < EXPERIENCE_MAX):
        raise InvalidPlayerData(
            f"experience must be in [{EXPERIENCE_MIN}, {EXPERIENCE_MAX})"
        )


def validate_new_player(request: PlayerRequest) -> None:
    """
    建立玩家時的驗證：name / birthday / experience 必填，再套用一般規則
    """
    if request.name is None:
        raise InvalidPlayerData("name is required")
    if request.birthday is None:
        raise InvalidPlayerData("birthday is required")

    validate_player_data(
        request.name, request.title, request.birthday, request.experience
    )


def is_empty_payload(request: PlayerRequest) -> bool:
    """
    檢查更新請求是否完全沒有提供任何欄位

    JSON 裡明確給 null 視同沒有提供
    """
    return not request.model_dump(exclude_none=True)
