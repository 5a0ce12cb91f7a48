"""Fixed instruction sequences for very small stacks."""

from __future__ import annotations

from pushswap.stack import Stack, bring_min_top, pa, pb, ra, rra, sa


def sort_three(a: Stack) -> None:
    """Order the top three values of a using swaps and rotations."""
    if len(a) < 3:
        raise ValueError("sort_three needs at least three values")
    first, second, third = list(a)[:3]
    if first < second < third:
        return
    if first > second > third:
        sa(a)
        rra(a)
    elif first > second and second < third and third > first:
        sa(a)
    elif first > second and second < third and third < first:
        ra(a)
    elif first < second and second > third and third > first:
        rra(a)
        sa(a)
    elif first < second and second > third and third < first:
        rra(a)


def sort_five(a: Stack, b: Stack) -> None:
    """Move the two smallest to b, sort the remaining three, then push a's top two onto b."""
    bring_min_top(a)
    pb(a, b)
    bring_min_top(a)
    pb(a, b)
    sort_three(a)
    pa(b, a)
    pa(b, a)