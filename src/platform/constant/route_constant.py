# API Route Constants

# Base API
API_BASE = '/api'

# Auth routes
AUTH_REGISTER = f'{API_BASE}/register'
AUTH_LOGIN = f'{API_BASE}/login'
AUTH_LOGOUT = f'{API_BASE}/logout'
AUTH_ME = f'{API_BASE}/user'

# Event routes
EVENT_BASE = f'{API_BASE}/events'
EVENT_LIST = EVENT_BASE
EVENT_CREATE = EVENT_BASE
EVENT_FEATURED = f'{EVENT_BASE}/featured'
EVENT_GET = f'{EVENT_BASE}/{{event_id}}'
EVENT_UPDATE = f'{EVENT_BASE}/{{event_id}}'
EVENT_DELETE = f'{EVENT_BASE}/{{event_id}}'
EVENT_TICKET_TYPES = f'{EVENT_BASE}/{{event_id}}/ticket-types'
EVENT_PERFORMERS = f'{EVENT_BASE}/{{event_id}}/performers'
ORGANIZER_EVENTS = f'{API_BASE}/organizer/{{organizer_id}}/events'

# Ticket type routes
TICKET_TYPE_BASE = f'{API_BASE}/ticket-types'
TICKET_TYPE_CREATE = TICKET_TYPE_BASE
TICKET_TYPE_GET = f'{TICKET_TYPE_BASE}/{{ticket_type_id}}'
TICKET_TYPE_UPDATE = f'{TICKET_TYPE_BASE}/{{ticket_type_id}}'

# Performer routes
PERFORMER_CREATE = f'{API_BASE}/performers'

# Ticket routes
TICKET_BASE = f'{API_BASE}/tickets'
TICKET_ISSUE = TICKET_BASE
TICKET_ALL = f'{TICKET_BASE}/all'
TICKET_GET = f'{TICKET_BASE}/{{ticket_id}}'
TICKET_BY_USER = f'{TICKET_BASE}/user/{{user_id}}'
TICKET_BY_REFERENCE = f'{TICKET_BASE}/reference/{{reference}}'
TICKET_CONFIRMATION = f'{TICKET_BASE}/reference/{{reference}}/confirmation'

# Scanner routes
SCANNER_VALIDATE = f'{API_BASE}/scanner/validate'

# User administration routes
USER_LIST = f'{API_BASE}/users'
USER_UPDATE = f'{API_BASE}/users/{{user_id}}'
USER_ORGANIZER_STATUS = f'{API_BASE}/users/{{user_id}}/organizer-status'
ORGANIZER_CREATE = f'{API_BASE}/organizers'

# Export routes
EXPORT_USERS = f'{API_BASE}/export/users'
EXPORT_TICKETS = f'{API_BASE}/export/tickets'
EXPORT_EVENTS = f'{API_BASE}/export/events'
