from collections import defaultdict
from dataclasses import asdict, dataclass
from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy.orm import Session

from app.core.projection import DirectoryRow, directory_projection

HUNDRED = Decimal("100")
CENT = Decimal("0.01")


@dataclass(frozen=True)
class RankingRow(DirectoryRow):
    contribution_pct: Decimal | None = None
    rank_in_department: int | None = None


def contribution_pct(salary: Decimal, department_total: Decimal) -> Decimal:
    if department_total == 0:
        return Decimal("0.00")
    return (salary / department_total * HUNDRED).quantize(CENT, rounding=ROUND_HALF_UP)


def competition_ranks(salaries: list[Decimal]) -> list[int]:
    """
    Standard competition ranking, highest salary first: ties share a rank
    and the next rank skips (1, 2, 2, 4).
    """
    ordered = sorted(salaries, reverse=True)
    first_position: dict[Decimal, int] = {}
    for position, salary in enumerate(ordered, start=1):
        first_position.setdefault(salary, position)
    return [first_position[s] for s in salaries]


def rank_rows(rows: list[DirectoryRow]) -> list[RankingRow]:
    """
    Per-department salary rank and contribution percentage. Employees
    without a salary are carried through unranked and do not count towards
    their department's total.
    """
    by_department: dict[int, list[DirectoryRow]] = defaultdict(list)
    for row in rows:
        if row.salary is not None:
            by_department[row.department_id].append(row)

    computed: dict[int, tuple[Decimal, int]] = {}
    for members in by_department.values():
        salaries = [Decimal(m.salary) for m in members]
        total = sum(salaries, Decimal("0"))
        for member, salary, rank in zip(members, salaries, competition_ranks(salaries)):
            computed[member.employee_id] = (contribution_pct(salary, total), rank)

    ranked = []
    for row in rows:
        pct, rank = computed.get(row.employee_id, (None, None))
        ranked.append(RankingRow(**asdict(row), contribution_pct=pct, rank_in_department=rank))

    ranked.sort(
        key=lambda r: (
            r.department_name,
            r.rank_in_department is None,
            r.rank_in_department or 0,
            r.employee_id,
        )
    )
    return ranked


def compute_rankings(db: Session, *, department_id: int | None = None) -> list[RankingRow]:
    return rank_rows(directory_projection(db, department_id=department_id))
