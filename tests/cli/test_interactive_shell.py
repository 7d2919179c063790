from salary_system.core.enums import ShellState
from salary_system.i18n.messages import RUSSIAN


def test_exit_terminates(run_shell):
    result = run_shell("4")

    assert result.shell.state == ShellState.TERMINATED
    assert "Goodbye!" in result.stdout


def test_add_basic_work_then_average(run_shell, registry):
    result = run_shell("1", "Manager", "500000", "1", "2", "4")

    assert registry.count() == 1
    assert "Work type added: Manager" in result.stdout
    assert "Average salary across all work types: 500000.00 RUB" in result.stdout


def test_add_bonus_work(run_shell, registry):
    result = run_shell("1", "  Sales ", "400000", "2", "50", "3", "4")

    assert registry.count() == 1
    assert "Work type with bonus added: Sales" in result.stdout
    assert "1. Sales: 600000.00 RUB (base: 400000.00 RUB, strategy: with bonus)" in result.stdout


def test_salary_over_ceiling_is_warned_and_not_added(run_shell, registry):
    result = run_shell("1", "Exec", "900000", "2", "50", "4")

    assert registry.count() == 0
    assert "exceeds maximum allowed amount" in result.stderr
    assert result.shell.state == ShellState.TERMINATED


def test_bonus_out_of_range_is_warned(run_shell, registry):
    result = run_shell("1", "Intern", "1000", "2", "250", "4")

    assert registry.count() == 0
    assert "bonus percentage must be between 0% and 200%" in result.stderr


def test_negative_base_is_warned(run_shell, registry):
    result = run_shell("1", "Clerk", "-1", "1", "4")

    assert registry.count() == 0
    assert "base amount must not be negative" in result.stderr


def test_input_format_errors_reprompt(run_shell, registry):
    result = run_shell("1", "", "   ", "Clerk", "abc", "1000", "x", "1", "4")

    assert registry.count() == 1
    assert result.stderr.count("Please enter a non-empty value.") == 2
    assert "Please enter a valid number" in result.stderr
    assert "Please enter a whole number" in result.stderr


def test_unknown_payment_type_abandons_add(run_shell, registry):
    result = run_shell("1", "Clerk", "1000", "3", "4")

    assert registry.count() == 0
    assert "Invalid payment type. Operation cancelled." in result.stderr


def test_average_on_empty_registry_warns(run_shell):
    result = run_shell("2", "4")

    assert "no work types have been added" in result.stderr
    assert "Average salary" not in result.stdout


def test_list_empty(run_shell):
    result = run_shell("3", "4")

    assert "The work list is empty." in result.stdout
    assert "=== All work types ===" not in result.stdout


def test_invalid_choice_keeps_looping(run_shell):
    result = run_shell("9", "hello", "4")

    assert result.stderr.count("Invalid choice") == 2
    assert result.shell.state == ShellState.TERMINATED


def test_choice_is_trimmed(run_shell):
    result = run_shell("  4  ")

    assert result.shell.state == ShellState.TERMINATED


def test_end_of_input_terminates_without_error(run_shell):
    result = run_shell("1", "Clerk")

    assert result.shell.state == ShellState.TERMINATED


def test_manager_and_sales_average(run_shell, registry):
    result = run_shell(
        "1", "Manager", "500000", "1",
        "1", "Sales", "400000", "2", "50",
        "2", "4",
    )

    assert registry.count() == 2
    assert "550000.00 RUB" in result.stdout


def test_russian_messages(run_shell):
    result = run_shell("1", "Exec", "900000", "2", "50", "3", "4", messages=RUSSIAN)

    assert "Добро пожаловать" in result.stdout
    assert "Итоговая зарплата (1350000.00 руб.) превышает максимальную допустимую сумму (1000000.00 руб.)" in result.stderr
    assert "Список работ пуст." in result.stdout


def test_non_finite_amount_reprompts(run_shell, registry):
    result = run_shell("1", "X", "nan", "inf", "5", "1", "4")

    assert registry.count() == 1
    assert result.stderr.count("Please enter a valid number") == 2


def test_negative_zero_base_is_stored_as_zero(run_shell, registry):
    result = run_shell("1", "Volunteer", "-0", "1", "3", "4")

    assert registry.count() == 1
    assert "1. Volunteer: 0.00 RUB (base: 0.00 RUB, strategy: basic)" in result.stdout
