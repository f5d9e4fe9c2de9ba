"""Static word lists and the keyword taxonomy used by the analyzers."""

from __future__ import annotations

# Content analysis vocabulary; the ATS check uses only the first twelve.
ACTION_VERBS: tuple[str, ...] = (
    "achieved", "built", "created", "developed", "established", "implemented",
    "improved", "increased", "led", "managed", "optimized", "reduced",
    "designed", "launched", "delivered", "executed", "coordinated", "analyzed",
)

ATS_ACTION_VERBS: tuple[str, ...] = ACTION_VERBS[:12]

RECOMMENDATION_ACTION_VERBS: tuple[str, ...] = (
    "achieved", "built", "created", "developed", "led", "managed",
)

# Binary skill tag for the resume's own keyword cloud.
SKILL_KEYWORDS: frozenset[str] = frozenset({
    "javascript", "python", "java", "react", "node", "sql", "aws", "docker",
    "kubernetes", "git", "agile", "scrum", "leadership", "management",
    "analysis", "design", "development", "testing", "deployment",
})

# Category -> keywords, in declaration order. Used for job matching.
KEYWORD_TAXONOMY: dict[str, tuple[str, ...]] = {
    "technologies": (
        "javascript", "typescript", "react", "angular", "vue", "node.js", "nodejs", "python",
        "java", "c#", "php", "ruby", "go", "rust", "swift", "kotlin", "html", "css", "sass",
        "less", "bootstrap", "tailwind", "jquery", "express", "fastapi", "django", "flask",
        "spring", "laravel", "rails", "asp.net", "graphql", "rest", "api", "sql", "nosql",
        "mongodb", "postgresql", "mysql", "redis", "elasticsearch",
    ),
    "frameworks": (
        "react", "angular", "vue", "svelte", "next.js", "nuxt", "gatsby", "express", "fastapi",
        "django", "flask", "spring", "laravel", "rails", "asp.net", "electron", "react native",
        "flutter", "xamarin", "ionic",
    ),
    "tools": (
        "git", "github", "gitlab", "bitbucket", "docker", "kubernetes", "jenkins", "circleci",
        "travis", "webpack", "vite", "rollup", "babel", "eslint", "prettier", "jest", "cypress",
        "selenium", "postman", "insomnia", "figma", "sketch", "adobe", "jira", "confluence",
        "slack", "teams", "zoom",
    ),
    "cloud": (
        "aws", "azure", "gcp", "google cloud", "heroku", "vercel", "netlify", "digitalocean",
        "linode", "cloudflare", "s3", "ec2", "lambda", "cloudformation", "terraform", "ansible",
    ),
    "methodologies": (
        "agile", "scrum", "kanban", "waterfall", "devops", "ci/cd", "tdd", "bdd",
        "pair programming", "code review", "continuous integration", "continuous deployment",
        "microservices", "mvc", "mvp", "solid", "dry", "clean code",
    ),
    "soft_skills": (
        "leadership", "communication", "teamwork", "collaboration", "problem solving",
        "analytical", "creative", "innovative", "adaptable", "flexible", "organized",
        "detail oriented", "time management", "project management", "mentoring", "training",
        "presentation",
    ),
    "experience_levels": (
        "junior", "senior", "lead", "principal", "architect", "manager", "director", "vp",
        "entry level", "mid level", "experienced", "expert", "1 year", "2 years", "3 years",
        "4 years", "5 years", "5+ years", "10+ years",
    ),
}

GENERAL_CATEGORY = "general"

STOP_WORDS: frozenset[str] = frozenset({
    "the", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by", "from",
    "up", "about", "into", "through", "during", "before", "after", "above", "below", "between",
    "among", "throughout", "despite", "towards", "upon", "concerning", "under", "within",
    "without", "against", "across", "behind", "beyond", "except", "since",
    "until", "while", "where", "when", "why", "how", "what", "which", "who", "whom",
    "whose", "that", "this", "these", "those", "i", "you", "he", "she", "it", "we", "they",
    "me", "him", "her", "us", "them", "my", "your", "his", "its", "our", "their", "mine",
    "yours", "hers", "ours", "theirs", "myself", "yourself", "himself", "herself", "itself",
    "ourselves", "yourselves", "themselves", "am", "is", "are", "was", "were", "being",
    "been", "be", "have", "has", "had", "do", "does", "did", "will", "would", "could",
    "should", "may", "might", "must", "can", "shall", "need", "dare", "ought", "used",
})

SUMMARY_WORDS: tuple[str, ...] = ("summary", "profile", "objective")
