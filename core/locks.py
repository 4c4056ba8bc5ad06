"""
並發控制工具

提供 Database-level 的鎖定機制，防止 update / delete 與並發的 delete 互相踩到

主要使用 SELECT ... FOR UPDATE 來實現悲觀鎖（Pessimistic Locking）；
SQLite 不支援 FOR UPDATE，SQLAlchemy 會直接省略，由 SQLite 的單一寫入者鎖保證一致
"""
from sqlalchemy.orm import Session, Query

from models import Player


def with_player_lock(player_id: int, db: Session) -> Query:
    """
    鎖定一個 Player（行級鎖）

    使用場景：
    - 更新玩家時（讀取 -> 合併 -> 驗證 -> 寫入 必須是原子的）
    - 刪除玩家時（兩個請求同時刪除同一個 id，後到的必須看到「不存在」）

    範例：
        player = with_player_lock(player_id, db).first()
        if not player:
            raise PlayerNotFound(player_id)
        db.delete(player)

    參數：
        player_id: Player 的 id
        db: SQLAlchemy Session

    返回：
        Query object（需要呼叫 .first() 來取得結果）

    注意：
        - nowait=False 表示如果鎖被佔用，會等待
        - 必須在 transaction 內使用（搭配 @transactional）
    """
    return db.query(Player).filter(
        Player.id == player_id
    ).with_for_update(nowait=False)
