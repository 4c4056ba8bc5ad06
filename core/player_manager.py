"""
Player Manager：管理 Player 的完整生命週期

職責：
1. 建立 Player（驗證 + 計算等級）
2. 更新 Player（合併 + 驗證 + 重新計算等級）
3. 刪除 Player（硬刪除）
4. 查詢 Player（單筆、列表、計數）

原則：
- 寫入一律經過 @transactional，失敗就 rollback，不會留下不合法的資料
- experience 只能透過 Player.set_experience() 寫入，level 永遠與 experience 一致
"""
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from models import Player, PlayerOrder
from schemas import PlayerRequest
from core.locks import with_player_lock
from core.exceptions import InvalidPlayerId, PlayerNotFound
from services.player_query_service import (
    PlayerFilter,
    find_players,
    count_players,
    page_to_offset
)
from services.validation_service import (
    validate_player_data,
    validate_new_player,
    is_empty_payload
)
from database import transactional

logger = logging.getLogger(__name__)


class PlayerManager:
    """Player 生命週期管理器"""

    @staticmethod
    def check_player_id(player_id: Optional[int]) -> None:
        """
        檢查 id 是否合法

        異常：
            InvalidPlayerId: id 為 None 或 <= 0
        """
        if player_id is None or player_id <= 0:
            raise InvalidPlayerId(player_id)

    @staticmethod
    @transactional
    def create_player(db: Session, request: PlayerRequest) -> Player:
        """
        建立新玩家

        流程：
        1. 驗證 payload（不合法就不碰資料庫）
        2. 建立 Player，banned 預設 False
        3. 計算 level / until_next_level
        4. 寫入並取得 id

        異常：
            InvalidPlayerData: payload 不合法
        """
        validate_new_player(request)

        player = Player(
            name=request.name,
            title=request.title,
            race=request.race,
            profession=request.profession,
            banned=request.banned if request.banned is not None else False
        )
        player.birthday_millis = request.birthday
        player.set_experience(request.experience)

        db.add(player)
        db.flush()  # 取得 player.id

        logger.info(f"Created player {player.id} ({player.name}) at level {player.level}")
        return player

    @staticmethod
    def get_player(db: Session, player_id: int) -> Player:
        """
        透過 id 取得 Player

        異常：
            InvalidPlayerId: id <= 0
            PlayerNotFound: Player 不存在
        """
        PlayerManager.check_player_id(player_id)

        player = db.query(Player).filter(Player.id == player_id).first()
        if not player:
            raise PlayerNotFound(player_id)
        return player

    @staticmethod
    @transactional
    def update_player(db: Session, player_id: int, request: PlayerRequest) -> Player:
        """
        更新玩家

        流程：
        1. 檢查 id，鎖定並取得 Player
        2. payload 完全沒有欄位：直接回傳原本的 Player（不驗證、不寫入）
        3. 合併：有提供的欄位覆蓋舊值，沒提供的保留舊值
        4. 驗證合併後的結果，不合法就不碰 Player
        5. 寫入；只有提供 experience 時才重新計算 level
        6. banned 例外：沒有提供時一律設為 False（沿用既有行為，見 DESIGN.md）

        異常：
            InvalidPlayerId: id <= 0
            PlayerNotFound: Player 不存在
            InvalidPlayerData: 合併後的資料不合法
        """
        PlayerManager.check_player_id(player_id)

        player = with_player_lock(player_id, db).first()
        if not player:
            raise PlayerNotFound(player_id)

        if is_empty_payload(request):
            logger.debug(f"Empty update payload for player {player_id}, nothing to do")
            return player

        name = request.name if request.name is not None else player.name
        title = request.title if request.title is not None else player.title
        birthday = request.birthday if request.birthday is not None else player.birthday_millis
        experience = request.experience if request.experience is not None else player.experience

        validate_player_data(name, title, birthday, experience)

        player.name = name
        player.title = title
        if request.race is not None:
            player.race = request.race
        if request.profession is not None:
            player.profession = request.profession
        if request.birthday is not None:
            player.birthday_millis = request.birthday
        if request.experience is not None:
            player.set_experience(request.experience)

        # 沒有明確帶 banned: true 的更新都會解除封禁
        player.banned = request.banned if request.banned is not None else False

        logger.info(f"Updated player {player_id}")
        return player

    @staticmethod
    @transactional
    def delete_player(db: Session, player_id: int) -> None:
        """
        刪除玩家（硬刪除）

        異常：
            InvalidPlayerId: id <= 0
            PlayerNotFound: Player 不存在（包含被並發請求先刪掉的情況）
        """
        PlayerManager.check_player_id(player_id)

        player = with_player_lock(player_id, db).first()
        if not player:
            raise PlayerNotFound(player_id)

        db.delete(player)
        logger.info(f"Deleted player {player_id}")

    @staticmethod
    def list_players(
        db: Session,
        filters: PlayerFilter,
        order: Optional[PlayerOrder] = None,
        page_number: int = 0,
        page_size: int = 10
    ) -> List[Player]:
        """
        篩選 + 排序 + 分頁

        參數：
            filters: 篩選條件（None 欄位不篩選）
            order: 排序方式，None 為 id 升冪
            page_number: 頁碼（從 0 開始）
            page_size: 每頁筆數（不設上限）
        """
        return find_players(
            db,
            filters,
            order,
            offset=page_to_offset(page_number, page_size),
            limit=page_size
        )

    @staticmethod
    def count_players(db: Session, filters: PlayerFilter) -> int:
        """符合篩選條件的玩家數量"""
        return count_players(db, filters)
