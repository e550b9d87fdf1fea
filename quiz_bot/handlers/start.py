from aiogram import Router
from aiogram.filters import CommandStart
from aiogram.types import Message
from aiogram.fsm.context import FSMContext

from quiz_bot.keyboards.main_menu import main_menu_keyboard

router = Router()

WELCOME_TEXT = (
    "👋 Hi! I'm Quiz Bot.\n\n"
    "Answer each question, press Next, and get your score at the end."
)


@router.message(CommandStart())
async def cmd_start(message: Message, state: FSMContext):
    await state.clear()
    await message.answer(WELCOME_TEXT, reply_markup=main_menu_keyboard())
