"""
API 層

FastAPI routers：只做形狀驗證與 HTTP 狀態碼對應，業務邏輯在 core/
"""
