"""
時間轉換：epoch milliseconds <-> datetime

對外（API）一律使用 epoch milliseconds，資料庫內存 naive UTC datetime
"""
from datetime import datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1)


def datetime_to_millis(value: datetime) -> int:
    """datetime -> epoch ms（naive 視為 UTC）"""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return (value - EPOCH) // timedelta(milliseconds=1)


# datetime 能表示的範圍
MILLIS_MIN = datetime_to_millis(datetime.min)
MILLIS_MAX = datetime_to_millis(datetime.max)

# 生日的合法範圍（不含邊界）
BIRTHDAY_MIN = datetime_to_millis(datetime(2000, 1, 1))
BIRTHDAY_MAX = datetime_to_millis(datetime(3000, 12, 31))


def millis_to_datetime(millis: int) -> datetime:
    """
    epoch ms -> naive UTC datetime

    超出 datetime 範圍時夾在 datetime.min / datetime.max，
    當作範圍篩選的邊界仍然成立
    """
    if millis <= MILLIS_MIN:
        return datetime.min
    if millis >= MILLIS_MAX:
        return datetime.max
    return EPOCH + timedelta(milliseconds=millis)
