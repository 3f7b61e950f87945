from guard_manager.attendance.model import ShiftTally
from guard_manager.core.enums import AdvanceScope, ExpenseType
from guard_manager.expenses.model import ExpenseRecord
from guard_manager.guards.model import Guard
from guard_manager.payroll.calculator.standard_calculator import StandardPayrollCalculator

GUARD = Guard(
    id="g1",
    name="Rajesh Kumar",
    code="SG-101",
    salary_per_shift=600,
    food_cost_per_shift=50,
    uniform_deduction=100,
)


def _expense(amount, type=ExpenseType.ADVANCE):
    return ExpenseRecord(id=f"e{amount}", guard_id="g1", date="2025-01-05", amount=amount, type=type)


def test_standard_calculator_nets_out_deductions():
    calc = StandardPayrollCalculator()
    slip = calc.salary_slip(
        guard=GUARD,
        month="2025-01",
        tally=ShiftTally(present_shifts=20, food_taken=10),
        expenses=[_expense(300), _expense(200)],
    )

    assert slip.total_shifts == 20
    assert slip.gross_salary == 12000
    assert slip.total_food_cost == 500
    assert slip.total_advance == 500
    assert slip.uniform_deduction == 100
    assert slip.net_salary == 10900


def test_all_expense_types_count_as_advance_by_default():
    calc = StandardPayrollCalculator()
    slip = calc.salary_slip(
        guard=GUARD,
        month="2025-01",
        tally=ShiftTally(),
        expenses=[_expense(100), _expense(40, ExpenseType.FINE), _expense(10, ExpenseType.OTHER)],
    )

    assert slip.total_advance == 150
    assert slip.expenses_by_type == {ExpenseType.ADVANCE: 100, ExpenseType.FINE: 40, ExpenseType.OTHER: 10}


def test_advance_only_scope_ignores_fines_and_other():
    calc = StandardPayrollCalculator(advance_scope=AdvanceScope.ADVANCE_ONLY)
    slip = calc.salary_slip(
        guard=GUARD,
        month="2025-01",
        tally=ShiftTally(present_shifts=1),
        expenses=[_expense(100), _expense(40, ExpenseType.FINE)],
    )

    assert slip.total_advance == 100
    assert slip.net_salary == 600 - 100 - 100


def test_net_salary_is_not_clamped():
    calc = StandardPayrollCalculator()
    slip = calc.salary_slip(guard=GUARD, month="2025-01", tally=ShiftTally(), expenses=[_expense(1000)])
    assert slip.net_salary == -1100
