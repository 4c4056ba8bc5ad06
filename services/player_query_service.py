"""
玩家查詢服務：把篩選條件轉成 SQL

職責：
1. 篩選（名稱 / 稱號模糊比對、種族 / 職業 / 封禁精確比對、生日 / 經驗 / 等級範圍）
2. 排序（固定幾種排序方式，預設 id 升冪）
3. 分頁（offset = page_number * page_size，limit = page_size）
4. 計數（同一組篩選條件，不排序不分頁）

沒有提供的篩選欄位一律視為「全部符合」
"""
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy.orm import Session, Query

from models import Player, PlayerOrder, Race, Profession
from services.time_service import millis_to_datetime

LIKE_ESCAPE = "\\"


@dataclass
class PlayerFilter:
    """列表 / 計數共用的篩選條件，None 代表不篩選"""
    name: Optional[str] = None
    title: Optional[str] = None
    race: Optional[Race] = None
    profession: Optional[Profession] = None
    after: Optional[int] = None
    before: Optional[int] = None
    banned: Optional[bool] = None
    min_experience: Optional[int] = None
    max_experience: Optional[int] = None
    min_level: Optional[int] = None
    max_level: Optional[int] = None


def _contains_pattern(text: str) -> str:
    """子字串比對用的 LIKE pattern，% 與 _ 需要跳脫"""
    escaped = (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def apply_player_filters(query: Query, filters: PlayerFilter) -> Query:
    """
    套用篩選條件

    規則：
    - name / title：不分大小寫的子字串比對
    - race / profession / banned：精確比對
    - after / before：生日範圍（epoch ms，含邊界）
    - min / max experience、min / max level：數值範圍（含邊界）
    """
    if filters.name is not None:
        query = query.filter(Player.name.ilike(_contains_pattern(filters.name), escape=LIKE_ESCAPE))
    if filters.title is not None:
        query = query.filter(Player.title.ilike(_contains_pattern(filters.title), escape=LIKE_ESCAPE))
    if filters.race is not None:
        query = query.filter(Player.race == filters.race)
    if filters.profession is not None:
        query = query.filter(Player.profession == filters.profession)
    if filters.after is not None:
        query = query.filter(Player.birthday >= millis_to_datetime(filters.after))
    if filters.before is not None:
        query = query.filter(Player.birthday <= millis_to_datetime(filters.before))
    if filters.banned is not None:
        query = query.filter(Player.banned == filters.banned)
    if filters.min_experience is not None:
        query = query.filter(Player.experience >= filters.min_experience)
    if filters.max_experience is not None:
        query = query.filter(Player.experience <= filters.max_experience)
    if filters.min_level is not None:
        query = query.filter(Player.level >= filters.min_level)
    if filters.max_level is not None:
        query = query.filter(Player.level <= filters.max_level)
    return query


def apply_player_order(query: Query, order: Optional[PlayerOrder]) -> Query:
    """
    套用排序，order 為 None 時使用 id 升冪

    非 id 排序時以 id 升冪作為第二排序鍵，確保分頁結果穩定
    """
    if order is None:
        order = PlayerOrder.ID

    column = getattr(Player, order.field_name)
    primary = column.desc() if order.descending else column.asc()

    if order in (PlayerOrder.ID, PlayerOrder.ID_DESC):
        return query.order_by(primary)
    return query.order_by(primary, Player.id.asc())


def page_to_offset(page_number: int, page_size: int) -> int:
    return page_number * page_size


def find_players(
    db: Session,
    filters: PlayerFilter,
    order: Optional[PlayerOrder],
    offset: int,
    limit: int
) -> List[Player]:
    """篩選 -> 排序 -> 分頁"""
    query = apply_player_filters(db.query(Player), filters)
    query = apply_player_order(query, order)
    return query.offset(offset).limit(limit).all()


def count_players(db: Session, filters: PlayerFilter) -> int:
    """計算符合篩選條件的玩家數量，沒有符合時回傳 0"""
    return apply_player_filters(db.query(Player), filters).count()
