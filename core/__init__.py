"""
核心業務邏輯層

這個 package 包含玩家資料的寫入流程，包括：
- Manager：管理 Player 的建立、更新、刪除與查詢
- Locks：並發控制工具
- Exceptions：業務異常
"""
