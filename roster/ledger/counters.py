"""Per-team gender counters.

Creating a participant bumps one counter with a single
``UPDATE team SET <col> = <col> + 1`` so concurrent registrations for the
same team cannot overwrite each other. Updates and deletes recount the
affected teams from their active members instead of adjusting in place.

Counters only exist in the gender participant schema; callers check
``ParticipantSchema.counts_gender`` before calling in here.
"""
import logging

from sqlalchemy import func, update
from sqlmodel import Session, col, select

from roster.ledger.store import commit_or_raise
from roster.models import Gender, Participant, Team

logger = logging.getLogger(__name__)

COUNTER_COLUMNS = {
    Gender.MALE: "male_count",
    Gender.FEMALE: "female_count",
}


def increment_for_participant(session: Session, participant: Participant) -> bool:
    """Add one to the counter matching the participant's gender.

    Returns False when nothing was changed: the participant has no gender,
    or its team does not resolve to an active row.
    """
    if participant.gender is None:
        return False

    column = COUNTER_COLUMNS[Gender(participant.gender)]
    team_column = getattr(Team, column)
    statement = (
        update(Team)
        .where(col(Team.id) == participant.team_id)
        .where(col(Team.deleted_at).is_(None))
        .values({column: team_column + 1})
    )
    result = session.execute(statement)
    if result.rowcount == 0:
        session.rollback()
        logger.warning(
            f"Team {participant.team_id} not found, skipping {column} increment "
            f"for participant {participant.id}"
        )
        return False

    commit_or_raise(session, f"increment {column}")
    logger.info(f"Incremented {column} of team {participant.team_id}")
    return True


def count_members_by_gender(session: Session, team_id: int) -> dict[Gender, int]:
    """Count active members of a team per gender, straight from the source rows."""
    statement = (
        select(Participant.gender, func.count())
        .where(col(Participant.team_id) == team_id)
        .where(col(Participant.deleted_at).is_(None))
        .where(col(Participant.gender).is_not(None))
        .group_by(Participant.gender)
    )
    counts = {gender: 0 for gender in Gender}
    for gender, total in session.exec(statement).all():
        counts[Gender(gender)] = total
    return counts


def recount_team(session: Session, team_id: int) -> Team | None:
    """Overwrite a team's counters with the real member counts.

    Returns None if the team is not active.
    """
    team = session.get(Team, team_id)
    if team is None or team.deleted_at is not None:
        logger.warning(f"Team {team_id} not found, skipping recount")
        return None

    counts = count_members_by_gender(session, team_id)
    if team.male_count != counts[Gender.MALE] or team.female_count != counts[Gender.FEMALE]:
        logger.info(
            f"Team {team_id} counters drifted: "
            f"male {team.male_count}->{counts[Gender.MALE]}, "
            f"female {team.female_count}->{counts[Gender.FEMALE]}"
        )
    team.male_count = counts[Gender.MALE]
    team.female_count = counts[Gender.FEMALE]
    session.add(team)
    commit_or_raise(session, f"recount team {team_id}")
    session.refresh(team)
    return team


def recount_all_teams(session: Session) -> int:
    """Recount every active team. Returns the number of teams processed."""
    team_ids = session.exec(
        select(Team.id).where(col(Team.deleted_at).is_(None)).order_by(col(Team.id))
    ).all()
    for team_id in team_ids:
        recount_team(session, team_id)
    return len(team_ids)
