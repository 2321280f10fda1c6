"""Built-in rating weights used when a club has not saved its own table."""

from __future__ import annotations

from typing import Dict, Mapping, Sequence, Tuple

from pyscout.models import AttributeWeight, CategoryWeights, ClubRatingWeights, PositionKey


def _category(
    category_id: str,
    label: str,
    weight: float,
    tooltip: str,
    attributes: Sequence[Tuple[str, str, float]] = (),
    *,
    metric: str | None = None,
) -> CategoryWeights:
    return CategoryWeights(
        id=category_id,
        label=label,
        weight=weight,
        tooltip=tooltip,
        attributes=[AttributeWeight(id=a_id, label=a_label, weight=a_weight) for a_id, a_label, a_weight in attributes],
        metric=metric,
    )


def _headline(general: float, potential: float) -> Tuple[CategoryWeights, ...]:
    return (
        _category("general", "Overall Rating", general, "Independent scouting rating"),
        _category("potential", "Potential", potential, "Forward-looking rating"),
    )


_GOALSCORING = (("goals_90", "Goals /90", 40), ("xg_90", "xG /90", 35), ("finishing_rating", "Finishing Rating", 25))
_AERIAL = (("aerial_win_pct", "Aerial Win %", 45), ("headed_goals", "Headed Goals", 25), ("aerial_duels_90", "Aerial Duels /90", 30))

CM_WEIGHTS: Tuple[CategoryWeights, ...] = _headline(100, 40) + (
    _category("goalscoring", "Goalscoring", 35, "Measures goal threat from this position", _GOALSCORING),
    _category(
        "creativity",
        "Creativity",
        70,
        "Ability to create chances and assist teammates",
        (("assists_90", "Assists /90", 30), ("xa_90", "xA /90", 25), ("key_passes_90", "Key Passes /90", 25), ("vision_rating", "Vision Rating", 20)),
    ),
    _category(
        "progression",
        "Progression",
        80,
        "Ability to move the ball up the pitch effectively",
        (
            ("prog_carries_90", "Prog. Carries /90", 30),
            ("prog_passes_90", "Prog. Passes /90", 30),
            ("dribbling_rating", "Dribbling Rating", 25),
            ("carry_distance_90", "Carry Distance /90", 15),
        ),
    ),
    _category(
        "pressing",
        "Pressing",
        70,
        "Intensity and effectiveness of pressing actions",
        (
            ("pressures_90", "Pressures /90", 35),
            ("tackles_won_90", "Tackles Won /90", 25),
            ("interceptions_90", "Interceptions /90", 20),
            ("work_rate_rating", "Work Rate Rating", 20),
        ),
    ),
    _category(
        "defending",
        "Defending",
        60,
        "Defensive contribution and positioning",
        (("tackles_90", "Tackles /90", 30), ("interceptions_90", "Interceptions /90", 25), ("blocks_90", "Blocks /90", 20), ("positioning_rating", "Positioning Rating", 25)),
    ),
    _category("aerial", "Aerial", 50, "Aerial presence and effectiveness in duels", _AERIAL),
)

GK_WEIGHTS: Tuple[CategoryWeights, ...] = _headline(100, 30) + (
    _category(
        "shot_stopping",
        "Shot Stopping",
        85,
        "Core ability to prevent goals from shots",
        (("save_pct", "Save %", 35), ("psxg_diff", "PSxG +/-", 35), ("reflexes_rating", "Reflexes Rating", 30)),
    ),
    _category(
        "distribution",
        "Distribution",
        65,
        "Passing and distribution quality",
        (("pass_completion", "Pass Completion %", 30), ("long_pass_pct", "Long Pass Accuracy", 35), ("goal_kicks", "Goal Kick Distance", 35)),
    ),
    _category(
        "commanding",
        "Commanding Area",
        60,
        "Control of the penalty area and set-piece situations",
        (("crosses_claimed", "Crosses Claimed %", 40), ("sweeper_actions", "Sweeper Actions /90", 30), ("aerial_ability", "Aerial Ability Rating", 30)),
    ),
)

CB_WEIGHTS: Tuple[CategoryWeights, ...] = _headline(100, 35) + (
    _category(
        "defending",
        "Defending",
        85,
        "Core defensive metrics",
        (
            ("tackles_90", "Tackles /90", 25),
            ("interceptions_90", "Interceptions /90", 25),
            ("blocks_90", "Blocks /90", 20),
            ("clearances_90", "Clearances /90", 15),
            ("positioning_rating", "Positioning Rating", 15),
        ),
    ),
    _category(
        "aerial",
        "Aerial",
        75,
        "Aerial dominance and heading ability",
        (("aerial_win_pct", "Aerial Win %", 50), ("headed_goals", "Headed Goals", 20), ("aerial_duels_90", "Aerial Duels /90", 30)),
    ),
    _category(
        "progression",
        "Progression",
        60,
        "Ball-playing ability from the back",
        (("prog_passes_90", "Prog. Passes /90", 35), ("prog_carries_90", "Prog. Carries /90", 30), ("pass_completion", "Pass Completion %", 35)),
    ),
    _category(
        "pressing",
        "Pressing",
        50,
        "Defensive pressing intensity",
        (("pressures_90", "Pressures /90", 50), ("tackles_won_90", "Tackles Won /90", 50)),
    ),
)

FULLBACK_WEIGHTS: Tuple[CategoryWeights, ...] = _headline(100, 40) + (
    _category(
        "defending",
        "Defending",
        65,
        "Defensive contribution from wide areas",
        (("tackles_90", "Tackles /90", 30), ("interceptions_90", "Interceptions /90", 30), ("blocks_90", "Blocks /90", 20), ("positioning_rating", "Positioning Rating", 20)),
    ),
    _category(
        "creativity",
        "Creativity",
        70,
        "Chance creation from wide positions",
        (("assists_90", "Assists /90", 30), ("xa_90", "xA /90", 25), ("crosses_90", "Crosses /90", 25), ("key_passes_90", "Key Passes /90", 20)),
    ),
    _category(
        "progression",
        "Progression",
        75,
        "Ball carrying and advancing play",
        (("prog_carries_90", "Prog. Carries /90", 35), ("prog_passes_90", "Prog. Passes /90", 30), ("carry_distance_90", "Carry Distance /90", 35)),
    ),
    _category(
        "pressing",
        "Pressing",
        60,
        "Work rate and pressing contribution",
        (("pressures_90", "Pressures /90", 40), ("tackles_won_90", "Tackles Won /90", 30), ("work_rate_rating", "Work Rate Rating", 30)),
    ),
)

DM_WEIGHTS: Tuple[CategoryWeights, ...] = _headline(100, 35) + (
    _category(
        "defending",
        "Defending",
        80,
        "Defensive shielding and ball-winning",
        (("tackles_90", "Tackles /90", 25), ("interceptions_90", "Interceptions /90", 30), ("blocks_90", "Blocks /90", 20), ("positioning_rating", "Positioning Rating", 25)),
    ),
    _category(
        "pressing",
        "Pressing",
        75,
        "Pressing intensity and ball recovery",
        (("pressures_90", "Pressures /90", 35), ("tackles_won_90", "Tackles Won /90", 30), ("work_rate_rating", "Work Rate Rating", 35)),
    ),
    _category(
        "progression",
        "Progression",
        65,
        "Ability to progress the ball from deep",
        (("prog_passes_90", "Prog. Passes /90", 40), ("prog_carries_90", "Prog. Carries /90", 30), ("pass_completion", "Pass Completion %", 30)),
    ),
    _category(
        "aerial",
        "Aerial",
        55,
        "Aerial presence in midfield",
        (("aerial_win_pct", "Aerial Win %", 50), ("aerial_duels_90", "Aerial Duels /90", 50)),
    ),
)

AM_WEIGHTS: Tuple[CategoryWeights, ...] = _headline(100, 45) + (
    _category(
        "creativity",
        "Creativity",
        85,
        "Chance creation and final third playmaking",
        (("assists_90", "Assists /90", 25), ("xa_90", "xA /90", 25), ("key_passes_90", "Key Passes /90", 30), ("vision_rating", "Vision Rating", 20)),
    ),
    _category("goalscoring", "Goalscoring", 65, "Goal threat from attacking midfield", _GOALSCORING),
    _category(
        "progression",
        "Progression",
        70,
        "Dribbling and carrying ability",
        (("prog_carries_90", "Prog. Carries /90", 35), ("dribbling_rating", "Dribbling Rating", 35), ("carry_distance_90", "Carry Distance /90", 30)),
    ),
    _category(
        "pressing",
        "Pressing",
        50,
        "Pressing from high positions",
        (("pressures_90", "Pressures /90", 50), ("work_rate_rating", "Work Rate Rating", 50)),
    ),
)

WINGER_WEIGHTS: Tuple[CategoryWeights, ...] = _headline(100, 45) + (
    _category("goalscoring", "Goalscoring", 70, "Goal threat from wide positions", _GOALSCORING),
    _category(
        "creativity",
        "Creativity",
        75,
        "Crossing, assists and chance creation",
        (("assists_90", "Assists /90", 25), ("xa_90", "xA /90", 25), ("crosses_90", "Crosses /90", 25), ("key_passes_90", "Key Passes /90", 25)),
    ),
    _category(
        "progression",
        "Progression",
        80,
        "Dribbling and carrying down the flank",
        (("prog_carries_90", "Prog. Carries /90", 30), ("dribbling_rating", "Dribbling Rating", 35), ("carry_distance_90", "Carry Distance /90", 35)),
    ),
    _category(
        "pressing",
        "Pressing",
        55,
        "Defensive work rate from wide areas",
        (("pressures_90", "Pressures /90", 50), ("work_rate_rating", "Work Rate Rating", 50)),
    ),
)

FORWARD_WEIGHTS: Tuple[CategoryWeights, ...] = _headline(100, 40) + (
    _category(
        "goalscoring",
        "Goalscoring",
        90,
        "Primary goal-scoring ability",
        (("goals_90", "Goals /90", 35), ("xg_90", "xG /90", 30), ("finishing_rating", "Finishing Rating", 20), ("shot_accuracy", "Shot Accuracy %", 15)),
    ),
    _category(
        "creativity",
        "Creativity",
        50,
        "Link-up play and chance creation",
        (("assists_90", "Assists /90", 35), ("xa_90", "xA /90", 30), ("key_passes_90", "Key Passes /90", 35)),
    ),
    _category(
        "aerial",
        "Aerial",
        60,
        "Aerial threat and hold-up play",
        (("aerial_win_pct", "Aerial Win %", 40), ("headed_goals", "Headed Goals", 35), ("aerial_duels_90", "Aerial Duels /90", 25)),
    ),
    _category(
        "pressing",
        "Pressing",
        55,
        "Pressing from the front",
        (("pressures_90", "Pressures /90", 50), ("work_rate_rating", "Work Rate Rating", 50)),
    ),
    _category(
        "progression",
        "Progression",
        45,
        "Dribbling and movement in the final third",
        (("prog_carries_90", "Prog. Carries /90", 40), ("dribbling_rating", "Dribbling Rating", 60)),
    ),
)


DEFAULT_POSITION_WEIGHTS: Mapping[PositionKey, Tuple[CategoryWeights, ...]] = {
    PositionKey.GK: GK_WEIGHTS,
    PositionKey.CB: CB_WEIGHTS,
    PositionKey.RB: FULLBACK_WEIGHTS,
    PositionKey.LB: FULLBACK_WEIGHTS,
    PositionKey.DM: DM_WEIGHTS,
    PositionKey.CM: CM_WEIGHTS,
    PositionKey.AM: AM_WEIGHTS,
    PositionKey.W: WINGER_WEIGHTS,
    PositionKey.F: FORWARD_WEIGHTS,
}


def default_club_weights(club_name: str) -> ClubRatingWeights:
    """Return an independent copy of the built-in table for ``club_name``."""

    weights: Dict[PositionKey, list[CategoryWeights]] = {
        key: [category.model_copy(deep=True) for category in categories]
        for key, categories in DEFAULT_POSITION_WEIGHTS.items()
    }
    return ClubRatingWeights(club_name=club_name, weights=weights, league_adjustments=True)
