from aiogram.fsm.state import StatesGroup, State


class QuizFlow(StatesGroup):
    answering_question = State()  # Session is active, choices can be toggled
    viewing_summary = State()     # Session finished, summary shown
