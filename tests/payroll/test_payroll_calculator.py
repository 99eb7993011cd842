from __future__ import annotations

from solar_ops.payroll.calculator.standard_calculator import StandardPayrollCalculator


def test_gross_adds_all_earnings():
    calc = StandardPayrollCalculator()

    assert calc.gross_salary({"basic_salary": 1000, "allowances": 50, "bonus": 25, "overtime": 10}) == 1085


def test_missing_components_count_as_zero():
    calc = StandardPayrollCalculator()

    gross = calc.gross_salary({"basic_salary": 1000})

    assert gross == 1000
    assert calc.net_salary({"basic_salary": 1000}, gross) == 1000


def test_net_subtracts_deductions():
    calc = StandardPayrollCalculator()

    assert calc.net_salary({"deductions": 150}, 1085) == 935
