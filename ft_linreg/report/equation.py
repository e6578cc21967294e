# ft_linreg/report/equation.py
from ft_linreg.report.base import Report


class EquationReport(Report):
    """y = <a>x, + <b>"""

    def render(self, samples, model) -> str:
        return f"y = {model.a}x, + {model.b}"
