"""
Static Reference Data

Stopwords, technology keywords, action verbs, known multi-word phrases,
the skill synonym table and the compiled header/title patterns used by the
keyword engine. Everything here is built once and never mutated afterwards.
"""

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Pattern, Tuple

logger = logging.getLogger(__name__)


STOPWORDS = frozenset([
    # Articles
    "a", "an", "the",
    # Pronouns
    "i", "me", "my", "myself", "we", "our", "ours", "ourselves", "you", "your",
    "yours", "yourself", "yourselves", "he", "him", "his", "himself", "she", "her",
    "hers", "herself", "it", "its", "itself", "they", "them", "their", "theirs",
    "themselves", "what", "which", "who", "whom", "this", "that", "these", "those",
    # Auxiliaries
    "am", "is", "are", "was", "were", "be", "been", "being", "have", "has", "had",
    "having", "do", "does", "did", "doing", "would", "should", "could", "ought",
    "will", "shall", "can", "may", "might", "must",
    # Prepositions
    "at", "by", "for", "from", "in", "into", "of", "on", "to", "with", "about",
    "above", "across", "after", "against", "along", "among", "around", "before",
    "behind", "below", "beneath", "beside", "between", "beyond", "during", "except",
    "inside", "near", "off", "outside", "over", "past", "since", "through",
    "throughout", "toward", "under", "until", "up", "upon", "within", "without",
    # Conjunctions
    "and", "but", "or", "nor", "so", "yet", "both", "either", "neither", "not",
    "only", "own", "same", "than", "too", "very", "just", "also",
    # JD boilerplate
    "ability", "able", "work", "working", "company", "team", "role", "position",
    "opportunity", "looking", "seeking", "join", "offer", "including", "etc",
    "related", "relevant", "strong", "excellent", "good", "great", "proven",
    "demonstrated", "successful", "effective", "required", "requirements",
    "responsibilities", "qualifications", "preferred", "minimum",
    "ensure", "provide", "support", "help", "need", "needs", "make",
    # Filler that wastes keyword slots
    "proficiency", "proficient", "understanding", "familiarity", "familiar",
    "knowledge", "experience", "expertise", "exposure", "contributions",
    "passion", "passionate", "enthusiasm", "comfortable", "competence",
    "competent", "skilled", "capable", "hands-on", "background",
    # Time
    "years", "year", "months", "month", "days", "day", "time", "times",
])

# canonical term -> variants that should count as the same skill
SKILL_SYNONYMS: Dict[str, List[str]] = {
    # Cloud platforms
    "cloud": ["gcp", "aws", "azure", "cloud-native", "cloud infrastructure", "google cloud", "amazon web services"],
    "gcp": ["google cloud platform", "google cloud", "gke", "cloud run", "bigquery"],
    "aws": ["amazon web services", "ec2", "s3", "lambda", "eks", "cloudwatch", "sagemaker"],
    "azure": ["microsoft azure", "azure devops", "aks", "azure functions"],

    # Leadership
    "leadership": ["led", "leading", "leader", "managed", "managing", "directed", "oversaw", "headed", "spearheaded"],
    "management": ["manager", "managing", "managed", "supervising", "supervisor", "oversight"],
    "engineering manager": ["em", "tech lead manager", "engineering lead", "eng manager", "engineering mgr"],
    "director": ["director of engineering", "engineering director", "director, engineering"],
    "people management": ["people manager", "team management", "managing people", "direct reports"],
    "mentoring": ["mentorship", "coaching", "career development", "growing engineers"],

    # Platform / infrastructure
    "platform": ["platform engineering", "internal platform", "developer platform", "devex", "infrastructure"],
    "infrastructure": ["infra", "cloud infrastructure", "platform infrastructure"],
    "devops": ["devex", "developer experience", "developer productivity", "developer tools"],
    "sre": ["site reliability", "reliability engineering", "platform reliability"],
    "system design": ["systems design", "architecture design", "technical design"],

    # Containers
    "kubernetes": ["k8s", "gke", "eks", "aks", "container orchestration"],
    "docker": ["containers", "containerization", "containerized"],
    "terraform": ["infrastructure as code", "iac", "pulumi", "hcl"],

    # CI/CD
    "ci/cd": ["cicd", "continuous integration", "continuous deployment", "continuous delivery", "pipelines"],
    "github actions": ["gh actions", "github workflows"],
    "jenkins": ["ci server", "build automation"],

    # Languages
    "python": ["py", "python3", "python2"],
    "javascript": ["js", "node", "nodejs", "typescript", "ts", "ecmascript"],
    "typescript": ["ts", "node typescript"],
    "java": ["jvm", "java8", "java11", "java17", "spring", "spring boot"],
    "go": ["golang", "go lang"],
    "c++": ["cpp", "c plus plus"],
    "rust": ["rustlang"],
    "ruby": ["rails", "ruby on rails"],
    "scala": ["akka", "play framework"],
    "kotlin": ["android kotlin", "kotlin multiplatform"],
    "swift": ["swiftui", "ios swift"],

    # Methodologies
    "agile": ["scrum", "kanban", "sprint", "agile methodology", "agile development"],
    "scrum": ["sprint", "sprint planning", "scrum master", "agile scrum"],

    # Architecture
    "microservices": ["microservice", "service-oriented", "distributed services"],
    "distributed systems": ["distributed computing", "distributed architecture"],
    "api": ["api design", "rest", "restful", "graphql", "grpc", "api development"],
    "event-driven": ["event sourcing", "cqrs", "message-driven", "pub/sub"],

    # Databases
    "sql": ["mysql", "postgresql", "postgres", "database", "rdbms"],
    "nosql": ["mongodb", "dynamodb", "cassandra", "redis"],
    "data modeling": ["schema design", "database design", "erd"],

    # Observability
    "observability": ["monitoring", "logging", "tracing", "metrics", "opentelemetry", "prometheus", "grafana"],
    "monitoring": ["observability", "alerting", "dashboards"],

    # Communication
    "stakeholder management": ["stakeholder alignment", "cross-functional", "executive communication"],
    "communication": ["written communication", "verbal communication", "presentation"],

    # Domains
    "healthcare": ["health tech", "healthtech", "medical", "clinical", "hipaa"],
    "fintech": ["financial technology", "finance", "banking", "payments"],
    "telecom": ["telecommunications", "5g", "4g", "3g", "wireless"],
    "ecommerce": ["e-commerce", "online retail", "marketplace", "shopping"],

    # AI/ML
    "machine learning": ["ml", "deep learning", "neural networks", "model training", "ml engineering"],
    "artificial intelligence": ["ai", "generative ai", "gen ai", "llm", "large language models"],
    "tensorflow": ["tf", "keras", "tf2"],
    "pytorch": ["torch", "torchvision"],
    "data science": ["data scientist", "statistical modeling", "predictive analytics"],
    "nlp": ["natural language processing", "text mining", "language models"],
    "computer vision": ["cv", "image recognition", "object detection"],

    # Data engineering
    "data pipeline": ["etl", "data ingestion", "data workflow", "data orchestration"],
    "data warehouse": ["data lake", "data lakehouse", "olap", "dimensional modeling"],
    "apache spark": ["spark", "pyspark", "spark sql"],
    "apache kafka": ["kafka", "kafka streams", "event streaming"],
    "airflow": ["apache airflow", "dag", "workflow orchestration"],
    "dbt": ["data build tool", "data transformation"],

    # Security
    "security": ["cybersecurity", "infosec", "information security", "appsec"],
    "authentication": ["auth", "oauth", "saml", "openid", "sso"],
    "encryption": ["tls", "ssl", "cryptography", "data encryption"],
    "compliance": ["soc2", "soc 2", "gdpr", "hipaa", "pci dss", "iso 27001"],

    # Product
    "product management": ["product manager", "pm", "product owner", "product strategy"],
    "roadmap": ["product roadmap", "technology roadmap", "strategic planning"],
    "user research": ["ux research", "user testing", "usability testing"],

    # Frontend
    "frontend": ["front-end", "front end", "client-side", "ui development"],
    "react": ["reactjs", "react.js", "react hooks", "react native"],
    "css": ["sass", "scss", "tailwind", "styled-components", "css-in-js"],
    "design system": ["component library", "ui library", "storybook"],

    # Mobile
    "mobile": ["mobile development", "mobile app", "native mobile"],
    "ios": ["iphone", "ipad", "apple platform", "uikit", "swiftui"],
    "android": ["android sdk", "jetpack compose", "android studio"],
    "react native": ["expo", "cross-platform mobile"],
    "flutter": ["dart", "cross-platform mobile"],

    # Testing
    "testing": ["test automation", "qa", "quality assurance", "test engineering"],
    "unit testing": ["unit tests", "test-driven development", "tdd"],
    "integration testing": ["integration tests", "e2e testing", "end-to-end testing"],

    # Project management
    "project management": ["program management", "delivery management", "project planning"],
    "jira": ["atlassian", "confluence", "project tracking"],
}

# Ordered: ties in phrase length are searched in this order.
KNOWN_PHRASES: Tuple[str, ...] = (
    # AI/ML
    "machine learning", "deep learning", "neural networks", "natural language processing",
    "computer vision", "data science", "artificial intelligence", "generative ai",
    "large language models", "model training", "ml engineering", "reinforcement learning",
    "feature engineering",

    # Data
    "data pipeline", "data warehouse", "data lake", "data engineering", "data modeling",
    "data governance", "data quality", "data analytics", "big data", "data processing",
    "real-time data", "data integration", "data migration",

    # Architecture
    "system design", "systems design", "distributed systems", "microservices architecture",
    "event-driven architecture", "service-oriented architecture", "domain-driven design",
    "api design", "api development", "technical architecture", "solution architecture",
    "high availability", "fault tolerance", "load balancing", "horizontal scaling",

    # Cloud & infrastructure
    "cloud infrastructure", "infrastructure as code", "cloud-native", "cloud migration",
    "container orchestration", "platform engineering", "developer platform",
    "google cloud platform", "amazon web services", "microsoft azure",
    "site reliability", "reliability engineering",

    # DevOps & CI/CD
    "continuous integration", "continuous deployment", "continuous delivery",
    "github actions", "build automation", "deployment automation",
    "infrastructure automation", "configuration management",

    # Management & leadership
    "engineering manager", "engineering director", "tech lead", "technical lead",
    "people management", "team management", "team building", "performance management",
    "stakeholder management", "cross-functional", "direct reports",
    "product management", "product manager", "program management", "project management",
    "change management", "organizational design", "talent development",

    # Software engineering
    "software engineering", "software development", "software architecture",
    "full stack", "full-stack", "back end", "back-end", "front end", "front-end",
    "test-driven development", "code review", "technical debt",
    "agile development", "agile methodology", "design patterns",
    "object-oriented", "functional programming", "version control",

    # Frontend
    "user interface", "user experience", "design system", "component library",
    "responsive design", "web development", "single page application",
    "progressive web app", "accessibility compliance",

    # Mobile
    "mobile development", "mobile app", "react native", "cross-platform mobile",
    "native mobile", "mobile architecture",

    # Security
    "information security", "application security", "network security",
    "threat modeling", "penetration testing", "security audit",
    "access control", "identity management",

    # Testing
    "test automation", "quality assurance", "integration testing",
    "end-to-end testing", "unit testing", "performance testing",
    "load testing", "regression testing",

    # Databases
    "database design", "database administration", "schema design",
    "query optimization", "data replication",

    # Networking
    "api gateway", "service mesh", "message queue", "event streaming",

    # Business
    "business intelligence", "competitive analysis", "market research",
    "user research", "customer experience", "digital transformation",
    "technical strategy", "technology roadmap", "strategic planning",
    "open source",

    # Compliance
    "regulatory compliance", "risk management", "audit compliance",

    # Observability
    "log management", "distributed tracing", "incident management",
    "on-call", "runbook automation",
)

TECH_KEYWORDS = frozenset([
    # Cloud
    "gcp", "aws", "azure", "cloud", "kubernetes", "k8s", "docker", "terraform",
    "ansible", "pulumi", "cloudformation",
    # Languages
    "python", "java", "javascript", "typescript", "go", "golang", "rust", "c++",
    "c#", "ruby", "scala", "kotlin", "swift",
    # Frameworks
    "react", "angular", "vue", "node", "django", "flask", "spring", "rails",
    "express", "fastapi", "nextjs",
    # Data
    "sql", "postgresql", "mysql", "mongodb", "redis", "elasticsearch", "kafka",
    "spark", "hadoop", "bigquery", "snowflake", "databricks",
    # CI/CD
    "jenkins", "github", "gitlab", "bitbucket", "circleci", "travis",
    "argocd", "spinnaker", "tekton",
    # Monitoring
    "prometheus", "grafana", "datadog", "splunk", "newrelic", "pagerduty",
    "opentelemetry", "jaeger",
    # Protocols
    "rest", "graphql", "grpc", "websockets", "http", "tcp",
    # Security
    "oauth", "jwt", "ssl", "tls", "sso", "iam",
    # Methodologies
    "agile", "scrum", "kanban", "devops", "sre", "ci/cd", "cicd",
    # Multi-word
    "machine learning", "deep learning", "data pipeline", "data warehouse",
    "infrastructure as code", "system design", "distributed systems",
    "github actions", "site reliability",
])

ACTION_VERBS = frozenset([
    # Leadership
    "led", "managed", "directed", "oversaw", "headed", "supervised", "mentored",
    "coached", "guided", "coordinated", "orchestrated", "spearheaded",
    # Achievement
    "achieved", "delivered", "accomplished", "completed", "exceeded", "surpassed",
    # Creation
    "built", "created", "designed", "developed", "established", "founded",
    "implemented", "launched", "initiated", "introduced",
    # Improvement
    "improved", "enhanced", "optimized", "streamlined", "accelerated", "increased",
    "reduced", "decreased", "transformed", "modernized", "upgraded",
    # Strategy
    "architected", "strategized", "planned", "pioneered", "innovated",
    # Collaboration
    "collaborated", "partnered", "aligned", "unified", "integrated",
    # Technical
    "engineered", "automated", "scaled", "migrated", "deployed", "configured",
])

# Section markers. Nice-to-have is checked before required so that
# "preferred qualifications" never lands in the required bucket.
NICE_TO_HAVE_MARKERS: Tuple[str, ...] = (
    "nice to have", "preferred", "bonus", "plus", "ideal", "desired",
    "additionally", "preferred qualifications", "it would be great if",
    "extra credit", "nice-to-have", "additional qualifications",
    "desirable", "a plus", "advantageous",
)

REQUIRED_SECTION_MARKERS: Tuple[str, ...] = (
    "required", "requirements", "must have", "minimum qualifications",
    "what you bring", "what we require", "essential", "mandatory",
    "what you'll need", "qualifications", "what we're looking for",
    "you should have", "key skills", "core requirements",
    "basic qualifications", "you will need", "key qualifications",
)

RESPONSIBILITIES_MARKERS: Tuple[str, ...] = (
    "responsibilities", "what you'll do", "what you will do",
    "your role", "the role", "job duties", "key responsibilities",
    "day to day", "day-to-day", "in this role", "you will",
    "duties", "scope", "about the role", "role overview",
)

ABOUT_SECTION_MARKERS: Tuple[str, ...] = (
    "about us", "about the company", "who we are", "our mission",
    "company overview", "about the team", "why join",
    "what we offer", "benefits", "perks", "compensation",
)

# Symbol-bearing tech names rewritten before word splitting.
TECH_TOKEN_REWRITES: Tuple[Tuple[str, str], ...] = (
    ("c++", "cpp"),
    ("c#", "csharp"),
    (".net", "dotnet"),
    ("node.js", "nodejs"),
    ("react.js", "reactjs"),
    ("vue.js", "vuejs"),
    ("ci/cd", "cicd"),
)

ROLE_WORD_PATTERN = re.compile(
    r"\b(engineer|manager|director|lead|senior|staff|principal|architect|developer|"
    r"analyst|scientist|designer|head|vp|vice president|coordinator|administrator|"
    r"specialist|consultant|strategist)\b",
    re.IGNORECASE,
)

TITLE_LABEL_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(r"job title:\s*([^\n]+)", re.IGNORECASE),
    re.compile(r"position:\s*([^\n]+)", re.IGNORECASE),
    re.compile(r"role:\s*([^\n]+)", re.IGNORECASE),
    re.compile(r"title:\s*([^\n]+)", re.IGNORECASE),
    re.compile(r"hiring for:\s*([^\n]+)", re.IGNORECASE),
    re.compile(r"we are hiring[^:]*:\s*([^\n]+)", re.IGNORECASE),
)

MARKDOWN_HEADING_PATTERN = re.compile(r"^#{1,3}\s+")
BOLD_LINE_PATTERN = re.compile(r"^\*\*[^*]+\*\*\s*$")
BOLD_EDGE_PATTERN = re.compile(r"^\*\*|\*\*$")
ALL_CAPS_HEADER_PATTERN = re.compile(r"^[A-Z][A-Z\s/&-]{3,}$")
WORD_COLON_HEADER_PATTERN = re.compile(r"^[A-Za-z][A-Za-z\s'‘’-]{2,}:\s*$")
TRAILING_COLON_PATTERN = re.compile(r":\s*$")
BULLET_PREFIX_PATTERN = re.compile(r"^\s*-")
HTML_TAG_PATTERN = re.compile(r"<[^>]+>")


@dataclass(frozen=True)
class ReferenceData:
    """Immutable bundle of every lookup table the engine reads."""

    stopwords: frozenset
    tech_keywords: frozenset
    action_verbs: frozenset
    known_phrases: frozenset
    sorted_phrases: Tuple[str, ...]
    skill_synonyms: Mapping[str, Tuple[str, ...]]
    synonym_reverse_index: Mapping[str, Tuple[str, ...]]
    nice_to_have_markers: Tuple[str, ...] = NICE_TO_HAVE_MARKERS
    required_markers: Tuple[str, ...] = REQUIRED_SECTION_MARKERS
    responsibilities_markers: Tuple[str, ...] = RESPONSIBILITIES_MARKERS
    about_markers: Tuple[str, ...] = ABOUT_SECTION_MARKERS
    tech_token_rewrites: Tuple[Tuple[str, str], ...] = TECH_TOKEN_REWRITES
    role_word_pattern: Pattern[str] = ROLE_WORD_PATTERN
    title_label_patterns: Tuple[Pattern[str], ...] = TITLE_LABEL_PATTERNS


def build_synonym_reverse_index(
    skill_synonyms: Mapping[str, Iterable[str]]
) -> Dict[str, Tuple[str, ...]]:
    """
    Invert the synonym table: lowercased synonym -> canonical terms listing it.

    Canonical terms keep the order in which they appear in the forward table.
    """
    index: Dict[str, List[str]] = {}
    for canonical, synonyms in skill_synonyms.items():
        for synonym in synonyms:
            index.setdefault(synonym.lower(), []).append(canonical)
    return {synonym: tuple(canonicals) for synonym, canonicals in index.items()}


def build_reference_data(
    skill_synonyms: Optional[Mapping[str, Iterable[str]]] = None,
    known_phrases: Optional[Iterable[str]] = None,
    stopwords: Optional[Iterable[str]] = None,
    tech_keywords: Optional[Iterable[str]] = None,
    action_verbs: Optional[Iterable[str]] = None,
) -> ReferenceData:
    """
    Build a reference bundle, deriving the reverse synonym index and the
    longest-first phrase order from the supplied tables.

    Any table left as None falls back to the module defaults.
    """
    synonyms = SKILL_SYNONYMS if skill_synonyms is None else skill_synonyms
    forward = {canonical: tuple(variants) for canonical, variants in synonyms.items()}
    reverse = build_synonym_reverse_index(forward)

    phrases = tuple(KNOWN_PHRASES if known_phrases is None else known_phrases)
    # sorted() is stable, so equal-length phrases keep table order
    sorted_phrases = tuple(sorted(phrases, key=len, reverse=True))

    reference = ReferenceData(
        stopwords=frozenset(STOPWORDS if stopwords is None else stopwords),
        tech_keywords=frozenset(TECH_KEYWORDS if tech_keywords is None else tech_keywords),
        action_verbs=frozenset(ACTION_VERBS if action_verbs is None else action_verbs),
        known_phrases=frozenset(phrases),
        sorted_phrases=sorted_phrases,
        skill_synonyms=MappingProxyType(forward),
        synonym_reverse_index=MappingProxyType(reverse),
    )
    logger.debug(
        f"Reference data built: {len(reference.known_phrases)} phrases, "
        f"{len(forward)} synonym groups, {len(reverse)} reverse entries"
    )
    return reference


@lru_cache(maxsize=1)
def get_reference_data() -> ReferenceData:
    """Return the process-wide default reference bundle."""
    return build_reference_data()
