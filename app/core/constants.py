"""Core constants: shared literal values for workflow evaluation."""

# due_date_approaching fires when the due date is at most this many hours away.
DUE_SOON_WINDOW_HOURS = 24

# Upper bound on tasks visited per project by one due-date scan.
DUE_SCAN_BATCH_SIZE = 500

# Slack Web API method used by the notification dispatcher.
SLACK_POST_MESSAGE_URL = "https://slack.com/api/chat.postMessage"
