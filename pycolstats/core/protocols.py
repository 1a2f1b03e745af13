"""
Core protocols for pycolstats.

Protocol (structural typing) rather than ABC, so a backend only has to
look like one.
"""

from typing import Protocol, TypeVar, runtime_checkable

D = TypeVar('D')  # Design type
P = TypeVar('P')  # Parameter payload type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    A backend takes a design and produces a Result wrapping a parameter
    payload. Backends are stateless; all inputs arrive with the design or
    as keyword arguments to solve().
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{domain}', e.g. 'cpu_columnwise'.
        """
        ...

    def solve(self, design: D, **kwargs) -> 'Result[P]':
        """
        Execute the computation.

        Raises:
            ValidationError: If the design or options are invalid
        """
        ...
