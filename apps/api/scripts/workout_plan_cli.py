"""
Print the BMI classification and workout plan for one measurement.

No database access; runs the same calculations as the API.

Usage:
  python scripts/workout_plan_cli.py --weight 90 --height 180
  python scripts/workout_plan_cli.py --weight 55 --height 170 --goal gain --json
"""

from __future__ import annotations

import json
import os
import sys


# Ensure the API root is on sys.path when run as a script.
_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _ROOT not in sys.path:
    sys.path.insert(0, _ROOT)


def main(argv: list[str] | None = None) -> int:
    import argparse

    from services.bmi_calculator import calculate_bmi, classify_bmi, round1, validate_measurement
    from services.goal_selection import GoalSelection, resolve_goal, suggest_goal
    from services.workout_plan import build_workout_plan

    parser = argparse.ArgumentParser(description="Workout plan from weight and height")
    parser.add_argument("--weight", type=float, required=True, help="weight in kg")
    parser.add_argument("--height", type=float, required=True, help="height in cm")
    parser.add_argument(
        "--goal",
        choices=[g.value for g in GoalSelection],
        default=GoalSelection.NONE.value,
        help="explicit goal; 'none' uses the goal suggested by BMI",
    )
    parser.add_argument("--json", action="store_true", help="print the plan as JSON")
    args = parser.parse_args(argv)

    errors = validate_measurement(args.weight, args.height)
    if errors:
        for error in errors:
            print(f"error: {error}", file=sys.stderr)
        return 2

    bmi = calculate_bmi(args.weight, args.height)
    category = classify_bmi(bmi)
    goal = resolve_goal(GoalSelection(args.goal), bmi)
    plan = build_workout_plan(args.weight, args.height, bmi, goal)

    if args.json:
        print(json.dumps({
            "bmi": round1(bmi),
            "category": category.label,
            "suggested_goal": suggest_goal(bmi).value,
            "plan": plan.to_dict(),
        }, ensure_ascii=False, indent=2))
        return 0

    gym = plan.gym_plan
    print(f"BMI: {round1(bmi)} ({category.label})")
    print(f"  {category.note}")
    print(f"Goal: {plan.goal.value} (suggested: {suggest_goal(bmi).value})")
    print(plan.summary)
    print(f"Current weight: {plan.current_weight_kg} kg, target: {plan.target_weight_kg} kg ({plan.delta_kg:+} kg)")
    print(f"Estimated duration: {plan.estimated_weeks} weeks")
    print(f"Strength: {gym.strength_sessions_per_week} x {gym.strength_minutes_per_session} min/week")
    print(f"Cardio:   {gym.cardio_sessions_per_week} x {gym.cardio_minutes_per_session} min/week")
    print(f"Steps:    {gym.steps_per_day}/day")
    for note in plan.notes:
        print(f"- {note}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
