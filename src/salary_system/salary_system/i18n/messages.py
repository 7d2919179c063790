"""User-facing texts of the interactive shell.

Two catalogs are available: Russian (``ru``) and English (``en``). Domain
errors are rendered through their ``code`` so the same exception reads
naturally in either language.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..core.exceptions import DomainError
from ..works.model import WorkEntry


@dataclass(frozen=True)
class Messages:
    language: str
    currency: str
    welcome: str
    ceiling_notice: str
    menu: tuple[str, ...]
    prompt_choice: str
    prompt_name: str
    prompt_base_amount: str
    payment_type_header: str
    payment_type_options: tuple[str, ...]
    prompt_payment_type: str
    prompt_bonus: str
    retry_non_empty: str
    retry_number: str
    retry_integer: str
    work_added: str
    bonus_work_added: str
    invalid_payment_type: str
    average_result: str
    list_header: str
    list_empty: str
    invalid_choice: str
    farewell: str
    warning_prefix: str
    error_prefix: str
    work_line: str
    strategy_labels: dict[str, str] = field(default_factory=dict)
    errors: dict[str, str] = field(default_factory=dict)

    def money(self, amount: float) -> str:
        return f"{amount:.2f} {self.currency}"

    def format_work(self, entry: WorkEntry) -> str:
        label = self.strategy_labels.get(entry.strategy.label, entry.strategy.label)
        return self.work_line.format(
            name=entry.name,
            final=self.money(entry.final_salary),
            base=self.money(entry.base_amount),
            strategy=label,
        )

    def render_error(self, exc: DomainError) -> str:
        template = self.errors.get(exc.code)
        if not template:
            return str(exc)
        params = {k: self.money(v) if k in ("final_salary", "ceiling") else v for k, v in exc.params.items()}
        return template.format(**params)


RUSSIAN = Messages(
    language="ru",
    currency="руб.",
    welcome="Добро пожаловать в систему расчёта зарплат!",
    ceiling_notice="Максимальная зарплата: {ceiling}\n",
    menu=(
        "=== МЕНЮ ===",
        "1. Добавить новый тип работы",
        "2. Рассчитать среднюю зарплату",
        "3. Показать все типы работ",
        "4. Выход",
        "==================",
    ),
    prompt_choice="Выберите действие: ",
    prompt_name="Введите название работы: ",
    prompt_base_amount="Введите базовую сумму оплаты (руб.): ",
    payment_type_header="\nВыберите тип оплаты:",
    payment_type_options=(
        "1. Базовая оплата (без надбавки)",
        "2. Оплата с надбавкой (в процентах)",
    ),
    prompt_payment_type="Ваш выбор (1 или 2): ",
    prompt_bonus="Введите процент надбавки (0–200%): ",
    retry_non_empty="❌ Введите непустое значение.",
    retry_number="❌ Введите корректное число (например: 120000.0).",
    retry_integer="❌ Введите целое число (1 или 2).",
    work_added="✅ Добавлен тип работы: {name}\n",
    bonus_work_added="✅ Добавлен тип работы с надбавкой: {name}\n",
    invalid_payment_type="❌ Неверный выбор типа оплаты. Отмена операции.\n",
    average_result="\n✅ Средняя зарплата по всем видам работ: {average}\n",
    list_header="\n=== Список всех типов работ ===",
    list_empty="Список работ пуст.",
    invalid_choice="❌ Неверный выбор. Попробуйте снова.\n",
    farewell="\nДо свидания! Работа системы завершена.",
    warning_prefix="⚠️ ",
    error_prefix="⚠️ Ошибка: ",
    work_line="{name}: {final} (база: {base}, стратегия: {strategy})",
    strategy_labels={"basic": "базовая", "bonus": "с надбавкой"},
    errors={
        "empty_name": "Название работы не может быть пустым",
        "negative_base_amount": "Базовая сумма оплаты не может быть отрицательной",
        "bonus_out_of_range": "Надбавка должна быть в диапазоне от {minimum:g}% до {maximum:g}%",
        "salary_over_ceiling": "Итоговая зарплата ({final_salary}) превышает максимальную допустимую сумму ({ceiling})",
        "no_works": "Не добавлено ни одного типа работ",
    },
)

ENGLISH = Messages(
    language="en",
    currency="RUB",
    welcome="Welcome to the salary calculation system!",
    ceiling_notice="Maximum salary: {ceiling}\n",
    menu=(
        "=== MENU ===",
        "1. Add a new work type",
        "2. Calculate average salary",
        "3. Show all work types",
        "4. Exit",
        "==================",
    ),
    prompt_choice="Choose an action: ",
    prompt_name="Enter the work name: ",
    prompt_base_amount="Enter the base amount: ",
    payment_type_header="\nChoose the payment type:",
    payment_type_options=(
        "1. Basic pay (no bonus)",
        "2. Pay with a percentage bonus",
    ),
    prompt_payment_type="Your choice (1 or 2): ",
    prompt_bonus="Enter the bonus percentage (0–200%): ",
    retry_non_empty="❌ Please enter a non-empty value.",
    retry_number="❌ Please enter a valid number (for example: 120000.0).",
    retry_integer="❌ Please enter a whole number (1 or 2).",
    work_added="✅ Work type added: {name}\n",
    bonus_work_added="✅ Work type with bonus added: {name}\n",
    invalid_payment_type="❌ Invalid payment type. Operation cancelled.\n",
    average_result="\n✅ Average salary across all work types: {average}\n",
    list_header="\n=== All work types ===",
    list_empty="The work list is empty.",
    invalid_choice="❌ Invalid choice. Please try again.\n",
    farewell="\nGoodbye! The system has shut down.",
    warning_prefix="⚠️ ",
    error_prefix="⚠️ Error: ",
    work_line="{name}: {final} (base: {base}, strategy: {strategy})",
    strategy_labels={"basic": "basic", "bonus": "with bonus"},
    errors={
        "empty_name": "name must not be empty",
        "negative_base_amount": "base amount must not be negative",
        "bonus_out_of_range": "bonus percentage must be between {minimum:g}% and {maximum:g}%",
        "salary_over_ceiling": "final salary ({final_salary}) exceeds maximum allowed amount ({ceiling})",
        "no_works": "no work types have been added",
    },
)

_CATALOGS = {m.language: m for m in (RUSSIAN, ENGLISH)}


def get_messages(language: str) -> Messages:
    key = (language or "").strip().lower()
    try:
        return _CATALOGS[key]
    except KeyError:
        raise ValueError(f"unsupported language: {language!r} (expected one of {sorted(_CATALOGS)})") from None
