# Webinar
WEBINAR_BASE = '/webinars'
WEBINAR_CHANGE_SEATS = WEBINAR_BASE + '/{webinar_id}/seats'

# Platform
HEALTH = '/health'
