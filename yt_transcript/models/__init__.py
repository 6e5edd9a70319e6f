from .enums import OutcomeKind, ErrorCategory
from .transcript import TranscriptRequest, TranscriptResult, CachedOutcome, ClassifiedError, UsageEvent
from .proxy import ProxyConfig
