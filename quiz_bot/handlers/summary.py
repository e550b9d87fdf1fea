import html

from aiogram.types import Message
from aiogram.fsm.context import FSMContext

from quiz_bot.core.evaluator import ChoiceFeedback, QuizSummary, summarize
from quiz_bot.core.session import SessionState
from quiz_bot.keyboards.main_menu import main_menu_keyboard
from quiz_bot.states.quiz_states import QuizFlow

CHOICE_MARKS = {
    ChoiceFeedback.SELECTED_CORRECT: ("✅", " — CORRECT"),
    ChoiceFeedback.SELECTED_INCORRECT: ("❌", " — INCORRECT"),
    ChoiceFeedback.MISSED_CORRECT: ("☑️", " — missed"),
    ChoiceFeedback.NEUTRAL: ("▫️", ""),
}


def _format_summary(summary: QuizSummary) -> str:
    """Render the summary as Telegram HTML."""
    lines = [
        f"📊 <b>Total Score: {summary.score} / {summary.total}</b> ({summary.percent}%)",
    ]

    for number, review in enumerate(summary.questions, start=1):
        lines.append("")
        lines.append(f"<b>{number}. {html.escape(review.prompt)}</b>")
        for choice in review.choices:
            mark, label = CHOICE_MARKS[choice.feedback]
            lines.append(f"{mark} {html.escape(choice.label)}{label}")

        if review.is_correct:
            lines.append("✔ Correct")
        elif not review.answered:
            lines.append("✘ Incorrect (no answer)")
        else:
            lines.append("✘ Incorrect")

    return "\n".join(lines)


async def show_summary(message: Message, state: FSMContext, session: SessionState):
    """Replace the last question with the final summary."""
    summary = summarize(session)
    await state.set_state(QuizFlow.viewing_summary)
    await state.update_data(session=session)
    await message.edit_text(
        _format_summary(summary),
        parse_mode="HTML",
        reply_markup=main_menu_keyboard(),
    )
