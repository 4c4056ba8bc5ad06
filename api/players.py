"""
Player API Endpoints

職責：
1. 玩家列表（篩選 / 排序 / 分頁）與計數
2. 建立、查詢、更新、刪除玩家

錯誤對應：
- InvalidPlayerId / InvalidPlayerData -> 400
- PlayerNotFound -> 404
- 其他（例如資料庫無法連線）-> 500
"""
from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from database import get_db
from models import Race, Profession, PlayerOrder
from schemas import PlayerRequest, PlayerResponse
from core.player_manager import PlayerManager
from core.exceptions import InvalidPlayerId, InvalidPlayerData, PlayerNotFound
from services.player_query_service import PlayerFilter

router = APIRouter(prefix="/rest/players", tags=["players"])
logger = logging.getLogger(__name__)


def get_player_filter(
    name: Optional[str] = Query(None),
    title: Optional[str] = Query(None),
    race: Optional[Race] = Query(None),
    profession: Optional[Profession] = Query(None),
    after: Optional[int] = Query(None, description="生日下限（epoch ms，含）"),
    before: Optional[int] = Query(None, description="生日上限（epoch ms，含）"),
    banned: Optional[bool] = Query(None),
    min_experience: Optional[int] = Query(None, alias="minExperience"),
    max_experience: Optional[int] = Query(None, alias="maxExperience"),
    min_level: Optional[int] = Query(None, alias="minLevel"),
    max_level: Optional[int] = Query(None, alias="maxLevel"),
) -> PlayerFilter:
    """
    列表與計數共用的篩選參數

    race / profession 不在列舉內時 FastAPI 會直接回 422
    """
    return PlayerFilter(
        name=name,
        title=title,
        race=race,
        profession=profession,
        after=after,
        before=before,
        banned=banned,
        min_experience=min_experience,
        max_experience=max_experience,
        min_level=min_level,
        max_level=max_level
    )


@router.get("", response_model=List[PlayerResponse])
def list_players(
    filters: PlayerFilter = Depends(get_player_filter),
    order: Optional[PlayerOrder] = Query(None),
    page_number: int = Query(0, alias="pageNumber", ge=0),
    page_size: int = Query(10, alias="pageSize", ge=1),
    db: Session = Depends(get_db)
):
    """
    玩家列表

    參數：
        filters: 篩選條件（全部 optional）
        order: 排序方式（預設 ID 升冪）
        pageNumber: 頁碼（預設 0）
        pageSize: 每頁筆數（預設 10，不設上限）
    """
    try:
        players = PlayerManager.list_players(db, filters, order, page_number, page_size)
        return [PlayerResponse.from_player(player) for player in players]

    except Exception as e:
        logger.error(f"Failed to list players: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.get("/count", response_model=int)
def count_players(
    filters: PlayerFilter = Depends(get_player_filter),
    db: Session = Depends(get_db)
):
    """符合篩選條件的玩家數量（忽略排序與分頁）"""
    try:
        return PlayerManager.count_players(db, filters)

    except Exception as e:
        logger.error(f"Failed to count players: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.post("", response_model=PlayerResponse)
def create_player(player_data: PlayerRequest, db: Session = Depends(get_db)):
    """
    建立玩家

    必填：name、birthday、experience
    banned 沒有提供時預設 False
    """
    try:
        player = PlayerManager.create_player(db, player_data)
        return PlayerResponse.from_player(player)

    except InvalidPlayerData as e:
        logger.info(f"Rejected new player: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to create player: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.get("/{player_id}", response_model=PlayerResponse)
def get_player(player_id: int, db: Session = Depends(get_db)):
    """透過 id 取得玩家"""
    try:
        player = PlayerManager.get_player(db, player_id)
        return PlayerResponse.from_player(player)

    except InvalidPlayerId as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PlayerNotFound:
        raise HTTPException(status_code=404, detail="Player not found")
    except Exception as e:
        logger.error(f"Failed to get player: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.delete("/{player_id}")
def delete_player(player_id: int, db: Session = Depends(get_db)):
    """刪除玩家，成功時回傳空的 200"""
    try:
        PlayerManager.delete_player(db, player_id)
        return Response(status_code=200)

    except InvalidPlayerId as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PlayerNotFound:
        raise HTTPException(status_code=404, detail="Player not found")
    except Exception as e:
        logger.error(f"Failed to delete player: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")


@router.post("/{player_id}", response_model=PlayerResponse)
def update_player(player_id: int, player_data: PlayerRequest, db: Session = Depends(get_db)):
    """
    更新玩家

    注意：
    - payload 完全沒有欄位時直接回傳原本的玩家
    - 沒有帶 banned 的更新會把 banned 設為 False
    """
    try:
        player = PlayerManager.update_player(db, player_id, player_data)
        return PlayerResponse.from_player(player)

    except (InvalidPlayerId, InvalidPlayerData) as e:
        logger.info(f"Rejected update for player {player_id}: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except PlayerNotFound:
        raise HTTPException(status_code=404, detail="Player not found")
    except Exception as e:
        logger.error(f"Failed to update player: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Internal error")
