"""
Register scenarios used by the usage classifier.

Each scenario lists words that sit naturally in that register and, for
words that do not, a better-fitting alternative. Lists are curated by hand
and are intentionally short; unknown words are simply marked as not
appropriate with no suggestion.
"""

from typing import Sequence

from easydict.models.analysis_models import ScenarioDescriptor

FORMAL = ScenarioDescriptor(
    key="formal",
    label="Formal Writing",
    label_zh="正式写作",
    icon="✍️",
    description="Letters, reports, official documents",
    words=frozenset({
        "obtain", "purchase", "assist", "require", "request", "inform", "inquire",
        "commence", "conclude", "sufficient", "approximately", "additional",
        "regarding", "therefore", "however", "furthermore", "moreover", "consequently",
        "nevertheless", "demonstrate", "indicate", "establish", "ensure", "facilitate",
        "appropriate", "significant", "substantial", "numerous", "adequate", "prior",
        "subsequent", "endeavor", "acknowledge", "comprehend", "examine", "investigate",
        "receive", "provide", "participate", "terminate", "reside", "accommodate",
        "appreciate", "sincerely", "respectfully", "consider", "discuss", "determine",
        "decline", "attempt", "evaluate", "maintain", "notify", "verify", "affirm",
        "excellent", "beneficial", "utilize", "greetings", "regards",
    }),
    substitutions={
        "get": "obtain",
        "buy": "purchase",
        "help": "assist",
        "need": "require",
        "ask": "request",
        "tell": "inform",
        "start": "commence",
        "begin": "commence",
        "end": "conclude",
        "finish": "conclude",
        "enough": "sufficient",
        "about": "approximately",
        "extra": "additional",
        "so": "therefore",
        "but": "however",
        "also": "furthermore",
        "show": "demonstrate",
        "big": "substantial",
        "lots": "numerous",
        "many": "numerous",
        "try": "attempt",
        "check": "verify",
        "keep": "maintain",
        "live": "reside",
        "stop": "terminate",
        "understand": "comprehend",
        "look": "examine",
        "good": "excellent",
        "hi": "greetings",
        "hello": "greetings",
        "hey": "greetings",
        "thanks": "appreciate",
        "awesome": "excellent",
        "cool": "excellent",
        "kid": "child",
        "guy": "gentleman",
        "okay": "acceptable",
        "ok": "acceptable",
    }
)

CASUAL = ScenarioDescriptor(
    key="casual",
    label="Casual Conversation",
    label_zh="日常对话",
    icon="💬",
    description="Chatting with friends and family",
    words=frozenset({
        "hi", "hello", "hey", "thanks", "okay", "ok", "yeah", "sure", "cool",
        "awesome", "great", "nice", "good", "bad", "fun", "funny", "stuff", "thing",
        "guy", "kid", "get", "buy", "help", "need", "ask", "tell", "start", "end",
        "finish", "try", "keep", "live", "stop", "look", "show", "big", "small",
        "lots", "many", "pretty", "really", "totally", "maybe", "anyway", "gonna",
        "wanna", "chill", "hang", "grab", "catch", "mate", "buddy", "happy", "sad",
        "love", "like", "friend", "talk", "chat", "bye", "sorry", "yes", "no",
        "about", "enough", "extra", "also", "but", "so", "check", "understand",
    }),
    substitutions={
        "obtain": "get",
        "purchase": "buy",
        "assist": "help",
        "require": "need",
        "request": "ask",
        "inform": "tell",
        "inquire": "ask",
        "commence": "start",
        "conclude": "finish",
        "terminate": "stop",
        "sufficient": "enough",
        "approximately": "about",
        "additional": "extra",
        "therefore": "so",
        "however": "but",
        "furthermore": "also",
        "moreover": "also",
        "consequently": "so",
        "nevertheless": "still",
        "demonstrate": "show",
        "utilize": "use",
        "facilitate": "help",
        "endeavor": "try",
        "attempt": "try",
        "comprehend": "understand",
        "reside": "live",
        "numerous": "lots of",
        "substantial": "big",
        "significant": "big",
        "greetings": "hi",
        "regards": "cheers",
        "examine": "look at",
        "investigate": "look into",
        "verify": "check",
        "maintain": "keep",
        "excellent": "great",
        "beneficial": "good",
        "individual": "person",
        "residence": "home",
    }
)

ACADEMIC = ScenarioDescriptor(
    key="academic",
    label="Academic",
    label_zh="学术写作",
    icon="🎓",
    description="Essays, papers, exams such as TOEFL and IELTS",
    words=frozenset({
        "analyze", "analyse", "hypothesis", "theory", "evidence", "significant",
        "demonstrate", "indicate", "suggest", "examine", "investigate", "evaluate",
        "assess", "interpret", "conclude", "establish", "approach", "concept",
        "framework", "methodology", "data", "research", "study", "phenomenon",
        "consequently", "furthermore", "moreover", "however", "therefore", "thus",
        "hence", "whereas", "nevertheless", "substantial", "considerable",
        "fundamental", "crucial", "essential", "comprehensive", "empirical",
        "theoretical", "variable", "correlation", "factor", "impact", "illustrate",
        "emphasize", "argue", "assert", "contend", "propose", "identify", "define",
        "derive", "constitute", "numerous", "approximately", "predominantly",
        "obtain", "require", "sufficient", "additional", "utilize", "comprehend",
    }),
    substitutions={
        "show": "demonstrate",
        "big": "significant",
        "huge": "substantial",
        "important": "crucial",
        "think": "argue",
        "say": "assert",
        "look": "examine",
        "check": "evaluate",
        "find": "identify",
        "get": "obtain",
        "need": "require",
        "so": "therefore",
        "but": "however",
        "also": "furthermore",
        "lots": "numerous",
        "many": "numerous",
        "about": "approximately",
        "enough": "sufficient",
        "extra": "additional",
        "use": "utilize",
        "understand": "comprehend",
        "idea": "concept",
        "thing": "factor",
        "effect": "impact",
        "mostly": "predominantly",
        "basic": "fundamental",
        "clear": "evident",
        "prove": "demonstrate",
        "good": "beneficial",
        "bad": "detrimental",
        "stuff": "material",
        "kid": "child",
    }
)

BUSINESS = ScenarioDescriptor(
    key="business",
    label="Business",
    label_zh="商务场合",
    icon="💼",
    description="Emails, meetings, presentations at work",
    words=frozenset({
        "deadline", "schedule", "meeting", "agenda", "proposal", "budget", "revenue",
        "profit", "client", "customer", "stakeholder", "strategy", "objective",
        "deliverable", "milestone", "priority", "resource", "efficient", "effective",
        "collaborate", "coordinate", "negotiate", "implement", "optimize", "leverage",
        "expand", "invest", "purchase", "assist", "request", "inform", "confirm",
        "follow", "update", "review", "discuss", "approve", "ensure", "provide",
        "receive", "regarding", "additional", "appreciate", "opportunity", "growth",
        "partner", "contract", "invoice", "market", "team", "manage", "deliver",
        "progress", "feedback", "timeline", "estimate", "forecast", "streamline",
        "consider", "attach", "regards", "sincerely", "greetings", "obtain", "require",
    }),
    substitutions={
        "buy": "purchase",
        "help": "assist",
        "ask": "request",
        "tell": "inform",
        "talk": "discuss",
        "chat": "discuss",
        "check": "review",
        "ok": "approve",
        "okay": "approve",
        "plan": "strategy",
        "goal": "objective",
        "use": "leverage",
        "improve": "optimize",
        "grow": "expand",
        "money": "budget",
        "boss": "manager",
        "job": "position",
        "work": "collaborate",
        "hi": "greetings",
        "hello": "greetings",
        "hey": "greetings",
        "thanks": "appreciate",
        "bye": "regards",
        "fix": "resolve",
        "problem": "issue",
        "cheap": "cost-effective",
        "fast": "efficient",
        "get": "obtain",
        "need": "require",
        "guy": "colleague",
        "stuff": "materials",
    }
)

SOCIAL_MEDIA = ScenarioDescriptor(
    key="social_media",
    label="Social Media",
    label_zh="社交媒体",
    icon="📱",
    description="Posts, comments and short messages online",
    words=frozenset({
        "awesome", "cool", "amazing", "love", "like", "share", "follow", "post",
        "trending", "viral", "epic", "lit", "vibe", "mood", "lol", "omg", "fun",
        "funny", "cute", "happy", "great", "nice", "wow", "yay", "hey", "hi",
        "hello", "thanks", "friend", "selfie", "hashtag", "update", "news", "check",
        "watch", "fave", "favorite", "best", "crazy", "literally", "totally", "super",
        "chill", "hype", "goals", "fam", "bestie", "stuff", "grab", "catch",
    }),
    substitutions={
        "excellent": "awesome",
        "extraordinary": "amazing",
        "remarkable": "amazing",
        "greetings": "hey",
        "appreciate": "thanks",
        "acquaintance": "friend",
        "commence": "start",
        "purchase": "grab",
        "observe": "check out",
        "photograph": "pic",
        "favourite": "fave",
        "utilize": "use",
        "obtain": "get",
        "inform": "let you know",
        "sincerely": "xoxo",
        "regards": "cheers",
        "delighted": "so happy",
        "humorous": "funny",
        "enthusiasm": "hype",
    }
)

SCENARIOS: Sequence[ScenarioDescriptor] = (
    FORMAL,
    CASUAL,
    ACADEMIC,
    BUSINESS,
    SOCIAL_MEDIA,
)
