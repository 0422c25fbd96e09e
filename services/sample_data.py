"""Built-in sample team updates used as fallback and demo data."""

from typing import List

from models.update import UpdateRecord


def _update(id, member, title, date, goal, initiative, description, health, status, due):
    return UpdateRecord(
        id=id,
        team_member=member,
        title=title,
        date=date,
        priority_goal=goal,
        initiative=initiative,
        description=description,
        health=health,
        status=status,
        due_date=due,
        feedback="",
    )


SAMPLE_UPDATES = (
    _update('1', 'ManagerA', 'Mgr, Program Mgmt Office', '2026-02-03', 'Engagement',
            'Elevate Team engagement', 'Kicked off new rewards program and team socials.',
            1, '20%', '2026-03-01'),
    _update('2', 'ManagerA', 'Mgr, Program Mgmt Office', '2026-02-03', 'Infrastructure',
            'Cloud Migration', 'Staging environment is 80% ready, slight delay in DB sync.',
            0, '45%', '2026-04-15'),
    _update('3', 'Sarah Jenkins', 'Sr. Product Manager', '2026-02-01', 'Customer Growth',
            'Referral Program v2', 'Legal approval pending, critical risk for launch date.',
            -1, '10%', '2026-02-28'),
    _update('4', 'Sarah Jenkins', 'Sr. Product Manager', '2026-02-01', 'Engagement',
            'Q1 Newsletter', 'Content drafted and ready for review.',
            1, '90%', '2026-02-10'),
    _update('5', 'David Chen', 'Lead Engineer', '2026-02-02', 'Technical Excellence',
            'API Rate Limiting', 'Successfully deployed to production, monitoring results.',
            1, '100%', '2026-02-01'),
    _update('6', 'David Chen', 'Lead Engineer', '2026-02-02', 'Technical Excellence',
            'Service Mesh Upgrade', 'Compatibility issues found during integration testing.',
            0, '30%', '2026-03-20'),
    _update('7', 'Elena Rodriguez', 'HR Director', '2026-01-30', 'Engagement',
            'Hybrid Work Policy', 'Finalizing draft for leadership sign-off.',
            1, '85%', '2026-02-15'),
    _update('8', 'Elena Rodriguez', 'HR Director', '2026-01-30', 'Hiring',
            'Engineering Pipeline', 'Recruiting agency underperforming, falling behind target.',
            -1, '15%', '2026-03-30'),
    _update('9', 'Tom Baker', 'Ops Lead', '2026-02-04', 'Efficiency',
            'Logistics Optimization', 'Route algorithms showing 5% fuel savings.',
            1, '60%', '2026-05-01'),
    _update('10', 'Tom Baker', 'Ops Lead', '2026-02-04', 'Infrastructure',
            'Warehouse expansion', 'Zoning permits delayed indefinitely.',
            -1, '5%', '2026-08-01'),
)


def sample_updates() -> List[UpdateRecord]:
    """Fresh list of the sample updates."""
    return list(SAMPLE_UPDATES)
