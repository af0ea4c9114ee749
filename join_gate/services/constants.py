from telegram.constants import ChatMemberStatus

"""
membership
"""
ADMITTED_STATUSES = (
    ChatMemberStatus.MEMBER.value,
    ChatMemberStatus.ADMINISTRATOR.value,
    ChatMemberStatus.OWNER.value,
)

"""
callback tokens
"""
RECHECK_CALLBACK_DATA = "check_join"

"""
fixed reply texts
"""
JOIN_PROMPT_TEXT = (
    "👋 برای استفاده از امکانات ربات، لطفاً ابتدا در کانال ما عضو شوید "
    "و سپس دکمه \"بررسی مجدد\" را بزنید."
)
JOIN_BUTTON_TEXT = "✅ عضویت در کانال"
RECHECK_BUTTON_TEXT = "🔄 بررسی مجدد عضویت"
WELCOME_TEXT = (
    "🎉 خوش آمدید! شما عضو کانال هستید.\n\n"
    "بزودی منوی اصلی در اینجا نمایش داده خواهد شد."
)
APOLOGY_TEXT = "خطایی در بررسی عضویت رخ داد. لطفاً لحظاتی دیگر دوباره تلاش کنید."
