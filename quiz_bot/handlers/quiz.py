import html
import logging
from typing import Optional

from aiogram import Router, F
from aiogram.types import CallbackQuery
from aiogram.fsm.context import FSMContext

from quiz_bot.core.exceptions import IndexOutOfRange, SessionFinished
from quiz_bot.core.session import SessionState, advance, select, start
from quiz_bot.handlers.summary import show_summary
from quiz_bot.keyboards.main_menu import main_menu_keyboard
from quiz_bot.keyboards.quiz_kb import choice_keyboard
from quiz_bot.states.quiz_states import QuizFlow

logger = logging.getLogger(__name__)
router = Router()

NO_QUIZ_TEXT = "No quiz in progress. Press Start quiz to begin."


def _parse_choice_callback(data: Optional[str]) -> Optional[int]:
    """Parse 'choice:<index>' into the index. None if malformed."""
    if not data:
        return None
    prefix, _, value = data.partition(":")
    if prefix != "choice" or not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _question_text(session: SessionState) -> str:
    question = session.current_question
    text = f"❓ Question {session.position} of {session.total}\n\n{html.escape(question.prompt)}"
    if question.format.is_multi:
        text += "\n\n<i>Select all that apply.</i>"
    return text


async def _render_question(callback: CallbackQuery, session: SessionState):
    await callback.message.edit_text(
        _question_text(session),
        parse_mode="HTML",
        reply_markup=choice_keyboard(session.current_question, session.pending.selection),
    )


@router.callback_query(F.data == "start_quiz")
async def start_quiz(callback: CallbackQuery, state: FSMContext, questions: tuple):
    """Start a fresh session over the injected dataset."""
    session = start(questions)
    await state.set_state(QuizFlow.answering_question)
    await state.update_data(session=session)
    logger.info("User %s started a quiz of %d questions", callback.from_user.id, session.total)

    await _render_question(callback, session)
    await callback.answer()


@router.callback_query(F.data.startswith("choice:"))
async def choice_pressed(callback: CallbackQuery, state: FSMContext):
    """Update the pending selection and redraw the choice buttons."""
    data = await state.get_data()
    session: Optional[SessionState] = data.get("session")
    if session is None:
        await callback.answer(NO_QUIZ_TEXT, show_alert=True)
        return

    choice_index = _parse_choice_callback(callback.data)
    if choice_index is None:
        logger.warning("Malformed choice callback from user %s: %r", callback.from_user.id, callback.data)
        await callback.answer()
        return

    try:
        updated = select(session, choice_index)
    except (IndexOutOfRange, SessionFinished) as e:
        logger.warning("Rejected choice from user %s: %s", callback.from_user.id, e)
        await callback.answer("This question is no longer active.", show_alert=True)
        return

    await state.update_data(session=updated)
    # Re-pressing the current single choice leaves the keyboard unchanged
    if updated.pending.selection != session.pending.selection:
        await callback.message.edit_reply_markup(
            reply_markup=choice_keyboard(updated.current_question, updated.pending.selection),
        )
    await callback.answer()


@router.callback_query(F.data == "next_question")
async def next_question(callback: CallbackQuery, state: FSMContext):
    """Freeze the current answer, then show the next question or the summary."""
    data = await state.get_data()
    session: Optional[SessionState] = data.get("session")
    if session is None:
        await callback.answer(NO_QUIZ_TEXT, show_alert=True)
        return

    try:
        session = advance(session)
    except SessionFinished as e:
        logger.warning("Rejected advance from user %s: %s", callback.from_user.id, e)
        await callback.answer("The quiz is already finished.", show_alert=True)
        return

    if session.is_finished:
        logger.info("User %s finished the quiz", callback.from_user.id)
        await show_summary(callback.message, state, session)
    else:
        await state.update_data(session=session)
        await _render_question(callback, session)
    await callback.answer()


@router.callback_query(F.data == "cancel_quiz")
async def cancel_quiz(callback: CallbackQuery, state: FSMContext):
    """Cancel the current quiz and go home."""
    await state.clear()
    await callback.message.edit_text(
        "Quiz cancelled. Back to the main menu.",
        reply_markup=main_menu_keyboard(),
    )
    await callback.answer()
