"""
等級服務：由經驗值推導等級

純計算邏輯，不涉及資料庫

公式：
- level = floor((sqrt(2500 + 200 * experience) - 50) / 100)
- until_next_level = 50 * (level + 1) * (level + 2) - experience
"""
import math


def calculate_level(experience: int) -> int:
    """
    根據經驗值計算等級

    範例：
        calculate_level(0) -> 0
        calculate_level(100) -> 1
        calculate_level(299) -> 1
        calculate_level(300) -> 2

    注意：
        - experience 在合法範圍 [0, 10_000_000) 內結果一定 >= 0，
          int() 截斷等同於 floor
    """
    return int((math.sqrt(2500 + 200 * experience) - 50) / 100)


def calculate_until_next_level(experience: int) -> int:
    """
    計算距離下一級還需要多少經驗值

    範例：
        calculate_until_next_level(0) -> 100
        calculate_until_next_level(100) -> 200
    """
    level = calculate_level(experience)
    return 50 * (level + 1) * (level + 2) - experience
