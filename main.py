#!/usr/bin/env python3
"""
expectations demo - two agents exchange greetings.

Runs alice's step loop against a scripted bob and prints what alice
selects and realizes each step, followed by the final arrangement.
"""

import argparse
import logging
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

from expectations import AgencySettings, AgencySystem, ModuleBundle, setup_logging
from expectations.arrangement import ArrangementBuilder, Node, dialogue_event
from expectations.domain import CurrentActivity
from expectations.modules import (
    ActionSelectionModule,
    ActionTimingModule,
    ArrangementUpdate,
    RecordingRealization,
    ScriptedCurrentActivity,
    ScriptedRecentActivity,
)
from expectations.state import SOCIAL_CONTEXT, InformationState, SocialContext
from expectations.timing import CONFLICT_AVOIDANCE


SELF_ID = "alice"
PARTNER_ID = "bob"


def build_greeting() -> Node:
    """alice greets, bob greets back, then either one says goodbye."""
    b = ArrangementBuilder()
    return b.sequence(
        "greeting",
        b.event(dialogue_event("greet", SELF_ID, PARTNER_ID), node_id="alice-greets"),
        b.event(dialogue_event("greet", PARTNER_ID, SELF_ID), node_id="bob-greets"),
        b.any_of(
            "closing",
            b.event(dialogue_event("farewell", SELF_ID, PARTNER_ID), node_id="alice-leaves"),
            b.event(dialogue_event("farewell", PARTNER_ID, SELF_ID), node_id="bob-leaves"),
        ),
    )


def build_system() -> AgencySystem:
    interaction = build_greeting()
    state = (
        InformationState.Builder()
        .with_component(SOCIAL_CONTEXT, SocialContext(self_id=SELF_ID, interaction=interaction))
        .build()
    )

    realization = RecordingRealization()
    # bob talks over step 2 and finishes his greeting by step 3
    recent = ScriptedRecentActivity(
        script=[(), (), (dialogue_event("greet", PARTNER_ID, SELF_ID),)],
        echo=realization,
        self_id=SELF_ID,
    )
    current = ScriptedCurrentActivity(
        script=[
            CurrentActivity(passive_ids=frozenset({PARTNER_ID})),
            CurrentActivity(active_ids=frozenset({PARTNER_ID})),
        ]
    )

    modules = (
        ModuleBundle.Builder()
        .with_recent_activity_perception(recent)
        .with_current_activity_perception(current)
        .with_state_update(ArrangementUpdate())
        .with_action_selection(ActionSelectionModule())
        .with_action_timing(ActionTimingModule({"greeting": CONFLICT_AVOIDANCE}))
        .with_action_realization(realization)
        .build()
    )
    return AgencySystem(state, modules)


def main():
    settings = AgencySettings.from_env(load_dotenv_file=False)

    parser = argparse.ArgumentParser(
        description="expectations - two agents exchange greetings"
    )
    parser.add_argument(
        "--steps",
        type=int,
        default=settings.max_steps,
        help=f"Maximum number of steps to run (default: {settings.max_steps})",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=settings.log_dir,
        help=f"Directory for debug.log (default: {settings.log_dir})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging on the console",
    )

    args = parser.parse_args()

    # Configure logging - file level from settings, console level depends on --debug
    console_level = logging.DEBUG if args.debug else settings.console_level_number
    log_path = setup_logging(args.log_dir, settings.log_level_number, console_level)
    print(f"Logging to: {log_path}")

    system = build_system()
    observer = system.observer

    print(f"\nRunning up to {args.steps} steps as {SELF_ID}...")
    print("-" * 40)
    for _ in range(args.steps):
        result = system.step()
        print(
            f"[{result.step}] target={result.target_move} | "
            f"actual={result.actual_move} | {result.realization_status.value}"
        )
        if observer.interaction.is_resolved:
            break
    print("-" * 40)
    print(observer.format_tree())


if __name__ == "__main__":
    main()
