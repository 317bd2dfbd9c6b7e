identity = 'http://fault.io/project/python/fault.chronology'
name = 'chronology'
abstract = 'Calendar chronologies, periods, and ISO-8601 text over millisecond instants.'
icon = '📅'
study = 'calendrics'

controller = 'fault.io'
contact = 'mailto:critical@fault.io'

version_info = (0, 1, 0)
version = '.'.join(map(str, version_info))
