"""CNF instance container"""

from dataclasses import dataclass, field
from typing import List, Tuple

# A clause is a disjunction of non-zero literals; -v negates variable v.
Clause = Tuple[int, ...]


@dataclass(frozen=True)
class CNFInstance:
    """
    Conjunction of clauses over variables 1..variable_count.

    The clause count is always derived from the clause list, so the DIMACS
    header can never disagree with the body.
    """

    variable_count: int
    clauses: Tuple[Clause, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "clauses", tuple(tuple(c) for c in self.clauses))

    @property
    def clause_count(self) -> int:
        return len(self.clauses)

    def validate(self) -> List[str]:
        """Return a list of problems (empty when every literal is in range)."""
        problems = []
        for index, clause in enumerate(self.clauses):
            if not clause:
                problems.append(f"clause {index} is empty")
            for literal in clause:
                if literal == 0 or abs(literal) > self.variable_count:
                    problems.append(f"clause {index} has literal {literal} outside [1, {self.variable_count}]")
        return problems
