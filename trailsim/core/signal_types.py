"""Signal type constants published by TrailEngine."""


class SignalTypes:
    """Signal name strings"""

    # daily pipeline
    DAY_ADVANCED = "day_advanced"
    LOCATION_ARRIVED = "location_arrived"
    JOURNEY_WON = "journey_won"
    MEMBER_ABANDONED = "member_abandoned"

    # fail evaluator
    JOURNEY_FAILED = "journey_failed"
    FORCED_ABANDONMENT = "forced_abandonment"

    # actions
    EVENT_DRAWN = "event_drawn"
    ITEM_BOUGHT = "item_bought"

    # session
    SNAPSHOT_RESTORED = "snapshot_restored"
