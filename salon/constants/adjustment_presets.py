"""Preset adjustments offered in the booking flow."""


class AdjustmentLimits:
    """Floors applied to every adjusted value."""

    MIN_DURATION_MINUTES = 5
    MIN_PRICE = 0


class AdjustmentReasons:
    """Reason strings attached to suggestions from a customer's history."""

    SAME_AS_LAST = "前回と同じ設定"
    HISTORICAL_AVERAGE = "過去の平均値 ({frequency}回の実績)"


# name, mode, price adjustment (% or yen), time adjustment (minutes), reason
BULK_PRESETS = [
    {"name": "初回割引 (20%OFF)", "mode": "percentage", "price": -20, "time": 0, "reason": "初回来店割引"},
    {"name": "VIP割引 (15%OFF)", "mode": "percentage", "price": -15, "time": 0, "reason": "VIP顧客割引"},
    {"name": "初回サービス (+10分)", "mode": "time", "price": 0, "time": 10, "reason": "初回のため時間延長"},
    {"name": "リピーター特典 (10%OFF)", "mode": "percentage", "price": -10, "time": 0, "reason": "リピーター特典"},
    {"name": "シニア割引 (10%OFF)", "mode": "percentage", "price": -10, "time": 0, "reason": "シニア割引"},
]

DURATION_PRESETS = [-15, -10, -5, 5, 10, 15, 30]

PRICE_PRESETS = [
    {"label": "-20%", "mode": "percentage", "value": -20},
    {"label": "-10%", "mode": "percentage", "value": -10},
    {"label": "-500円", "mode": "fixed", "value": -500},
    {"label": "+500円", "mode": "fixed", "value": 500},
    {"label": "+10%", "mode": "percentage", "value": 10},
    {"label": "+20%", "mode": "percentage", "value": 20},
]

COMMON_REASONS = [
    "初回来店のため",
    "VIP顧客のため",
    "髪質に合わせて時間延長",
    "特別な技術が必要",
    "リピーター特典",
    "シニア割引",
    "学生割引",
    "紹介割引",
]
