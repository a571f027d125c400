"""User-facing message catalog.

Arabic is the default locale; English is provided for the CLI and for
terminals without right-to-left support.
"""

from __future__ import annotations

DEFAULT_LOCALE = "ar"

MESSAGES: dict[str, dict[str, str]] = {
    "ar": {
        "run_error": "حدث خطأ في النظام. يرجى المحاولة مرة أخرى لاحقاً.",
        "copied": "تم نسخ النص بنجاح! جاهز للاستخدام.",
        "counts": "{chars} حرف | {words} كلمة",
        "start": "ابدأ التحويل",
        "analyzing": "جارِ الفحص...",
        "humanizing": "جارِ الأنسنة...",
        "audience": "الجمهور المستهدف (اختياري)",
        "audience_placeholder": "مثال: قراء مدونة تقنية...",
        "tone": "نبرة الصوت (اختياري)",
        "tone_placeholder": "مثال: فكاهي، جاد، تعليمي...",
        "before": "ما قبل الأنسنة",
        "after": "ما بعد الأنسنة",
        "ai_score": "بصمة الآلة",
        "human_score": "بصمة البشر",
        "readability": "المقروئية",
        "final_text": "النص البشري النهائي",
        "copy": "نسخ المحتوى المكتمل",
    },
    "en": {
        "run_error": "Something went wrong. Please try again later.",
        "copied": "Text copied. Ready to use.",
        "counts": "{chars} chars | {words} words",
        "start": "Humanize",
        "analyzing": "Analyzing...",
        "humanizing": "Humanizing...",
        "audience": "Target audience (optional)",
        "audience_placeholder": "e.g. readers of a tech blog...",
        "tone": "Tone of voice (optional)",
        "tone_placeholder": "e.g. playful, serious, educational...",
        "before": "Before",
        "after": "After",
        "ai_score": "AI score",
        "human_score": "Human score",
        "readability": "Readability",
        "final_text": "Final human text",
        "copy": "Copy result",
    },
}


def message(key: str, locale: str = DEFAULT_LOCALE, **values: object) -> str:
    """Look up a message, falling back to the default locale."""
    catalog = MESSAGES.get(locale) or MESSAGES[DEFAULT_LOCALE]
    text = catalog.get(key) or MESSAGES[DEFAULT_LOCALE][key]
    return text.format(**values) if values else text
