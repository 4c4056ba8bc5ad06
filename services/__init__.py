"""
服務層

這個 package 包含純計算邏輯與查詢組裝，不負責 transaction：
- LevelService：經驗值 -> 等級
- ValidationService：玩家資料驗證
- TimeService：epoch ms 與 datetime 轉換
- PlayerQueryService：篩選 / 排序 / 分頁 / 計數
"""
