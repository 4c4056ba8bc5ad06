"""
自定義異常類別

集中管理所有業務邏輯異常，方便 API 層統一轉成 HTTP 狀態碼：
- InvalidPlayerId / InvalidPlayerData -> 400
- PlayerNotFound -> 404
- 其他未預期的異常（例如資料庫無法連線）-> 500
"""


class PlayerRegistryException(Exception):
    """所有玩家服務異常的基類"""
    pass


# ============ Client error（400）============

class InvalidPlayerId(PlayerRegistryException):
    """玩家 ID 不合法（None 或 <= 0）"""
    def __init__(self, player_id):
        self.player_id = player_id
        super().__init__(f"Invalid player id: {player_id}")


class InvalidPlayerData(PlayerRegistryException):
    """玩家資料未通過驗證（名稱過長、經驗值超出範圍、生日超出範圍...）"""
    pass


# ============ Not found（404）============

class PlayerNotFound(PlayerRegistryException):
    """玩家不存在"""
    def __init__(self, player_id):
        self.player_id = player_id
        super().__init__(f"Player {player_id} not found")
