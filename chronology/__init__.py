"""
# Calendar chronologies, periods, and ISO-8601 text over integer millisecond instants.

# Instants are &int milliseconds from 1970-01-01T00:00:00Z. A chronology interprets
# an instant as field values, years, months, hours, and so on, under a calendar
# system and a time zone.

# [ Modules ]

# /&.core/
	# Field and duration type identifiers and the exception hierarchy.
# /&.chrono/
	# Chronology construction and the cache of instances by calendar and zone.
# /&.fields/
	# Field implementations shared by every calendar.
# /&.gregorian/, /&.julian/, /&.week/
	# Calendar arithmetic for the ISO, Gregorian, Julian, and week based fields.
# /&.zone/
	# Fixed offsets and transition tables for converting local time.
# /&.period/
	# Period types, immutable and mutable periods, and single unit periods.
# /&.types/
	# Durations, intervals, date-times, and partials.
# /&.format/, /&.isoformat/
	# Date-time formatter construction and the ISO-8601 layouts.
# /&.periodformat/
	# Period formatter construction, the ISO-8601 period layouts, and word formats.

# [ Executables ]

# /&.bin.iso/
	# Print an instant using every named ISO-8601 layout.
# /&.bin.between/
	# Print the period between two ISO-8601 instants.
"""
