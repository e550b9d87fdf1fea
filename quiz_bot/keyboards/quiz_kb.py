from aiogram.types import InlineKeyboardMarkup, InlineKeyboardButton

from quiz_bot.core.models import Question


def choice_keyboard(question: Question, selected: frozenset = frozenset()) -> InlineKeyboardMarkup:
    """One button per choice, selected choices marked, then Next and Cancel."""
    if question.format.is_multi:
        marks = ("☑️", "⬜")
    else:
        marks = ("🔘", "⚪")

    buttons = []
    for i, choice in enumerate(question.choices):
        mark = marks[0] if i in selected else marks[1]
        buttons.append([InlineKeyboardButton(
            text=f"{mark} {choice}",
            callback_data=f"choice:{i}",
        )])
    buttons.append([InlineKeyboardButton(text="Next ➡️", callback_data="next_question")])
    buttons.append([InlineKeyboardButton(text="❌ Cancel quiz", callback_data="cancel_quiz")])
    return InlineKeyboardMarkup(inline_keyboard=buttons)
