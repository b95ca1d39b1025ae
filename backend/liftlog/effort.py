from decimal import Decimal, ROUND_HALF_UP

# Matches the scale of workout_entries.effort
EFFORT_QUANTUM = Decimal("0.01")

def compute_effort(weight_kg, reps) -> Decimal:
    """weight_kg × reps in fixed-point decimal."""
    weight = weight_kg if isinstance(weight_kg, Decimal) else Decimal(str(weight_kg))
    return (weight * int(reps)).quantize(EFFORT_QUANTUM, rounding=ROUND_HALF_UP)
