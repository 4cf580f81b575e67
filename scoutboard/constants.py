"""Constants and mappings for the scouting workflow board."""

# Kanban buckets, in display order
BUCKETS = ('shortlisted', 'assigned', 'completed')

# Report statuses that count as a finished scouting job (drafts never do)
COMPLETING_REPORT_STATUSES = frozenset({'submitted', 'reviewed'})

PRIORITIES = ('High', 'Medium', 'Low')

MARKED_FOR_SCOUTING = 'marked_for_scouting'

# Effective status -> (label, variant, color)
STATUS_STYLES = {
    'marked_for_scouting': ('Marked for Scouting', 'outline', 'gray'),
    'assigned': ('Assigned', 'outline', 'red'),
    'in_progress': ('In Progress', 'outline', 'orange'),
    'reviewed': ('Under Review', 'outline', 'blue'),
    'completed': ('Completed', 'outline', 'green'),
}

REPORT_SUBMITTED_LABEL = 'Report Submitted'

# Effective status -> kanban bucket
BUCKET_FOR_STATUS = {
    'marked_for_scouting': 'shortlisted',
    'completed': 'completed',
    'assigned': 'assigned',
    'in_progress': 'assigned',
    'reviewed': 'assigned',
}

# Labels used when describing the last status change
STATUS_CHANGE_LABELS = {
    'assigned': 'Assigned',
    'in_progress': 'In Progress',
    'completed': 'Completed',
    'reviewed': 'Under review',
}

# Defaults for fields that are missing or empty in the raw rows.
# Applied once by scoutboard.normalize.
FIELD_DEFAULTS = {
    'player_name': 'Unknown Player',
    'club': 'Unknown Club',
    'position': 'Unknown',
    'rating': 'N/A',
    'scout_name': 'Unknown Scout',
    'unassigned': 'Unassigned',
    'marked_status_change': 'Marked for scouting',
}
