"""Fixed inputs to the diff: field names, ignore rules and the sample event."""
from __future__ import annotations

import json

# Path prefixes never reported, together with everything below them.
IGNORED_PATHS = ('statsigEnvironment',)

BOOTSTRAP_METADATA_FIELD = 'bootstrapMetadata'

# Checked in order; the first one holding an object is the user.
DIRECT_USER_KEYS = ('clientUser', 'user', 'statsigUser')

# Nested user object inside parsed bootstrap metadata.
METADATA_USER_KEY = 'user'

USER_FIELD_ALLOWLIST = (
    'userID',
    'stableID',
    'email',
    'ip',
    'appVersion',
    'sessionID',
    'city',
    'state',
    'country',
    'locale',
    'platform',
    'systemName',
    'systemVersion',
    'browserName',
    'browserVersion',
    'deviceType',
    'customIDs',
    'custom',
    'privateAttributes',
    'userAgent',
)

STABLE_ID_FIELD = 'stableID'
CUSTOM_IDS_FIELD = 'customIDs'

INLINE_PREVIEW_LIMIT = 90

SAMPLE_EVENT = {
    'userID': 'a-user',
    'city': 'Boydton',
    'state': 'USVA',
    'country': 'US',
    'sessionID': '4b45db8b-8a8b-4824-9238-a0ef6599b55d',
    'deviceType': 'Desktop',
    'gate': 'a_gate',
    'gateValue': 'true',
    'ruleID': 'pass:all:id_override',
    'bootstrapMetadata': (
        '{"user":{"userID":"a-user"},'
        '"generatorSDKInfo":{"sdkType":"statsig-node","sdkVersion":"6.4.5"},'
        '"lcut":1767919970932}'
    ),
    'reason': 'BootstrapStableIDMismatch:Recognized',
    'lcut': '1767919970932',
    'receivedAt': '1767949908191',
    'idType': 'userID',
    'ruleName': 'pass:all:id_override',
    'isExposureStale': 'false',
    'systemName': 'Windows',
    'systemVersion': '10.0.0',
    'browserName': 'Chrome',
    'browserVersion': '141.0.7390',
    'customIDs': {
        'stableID': '11f65358-95af-4a61-977f-bcbb34b2dc77',
    },
}

DEFAULT_INPUT = json.dumps(SAMPLE_EVENT, indent=2)
