"""
Directive texts and lookup tables for the podcast stages.

Branching on the event label or the audience is a table lookup here, so the
directive builders can be tested without touching any external service.
Podcasts are produced in French; image prompts are written in English.
"""
from typing import Dict, List, Tuple

from .models import Audience, EventLabel, PodcastRequest

QUESTION_COUNT = 5
IMAGE_PROMPT_COUNT = 2

# ============================================================
# EVENT CLASSIFIER
# ============================================================

STATUS_ANALYSIS_SYSTEM = (
    "You are an assistant that analyzes if a topic is related to an event "
    "and determines if it's past or upcoming."
)

STATUS_ANALYSIS_USER = (
    'Is the topic "{topic}" related to an event? If so, is it past or upcoming '
    "compared to today ({today})? Provide a brief explanation."
)

CATEGORIZER_SYSTEM = (
    "You are an assistant that categorizes event statuses into simple, single-word responses."
)

CATEGORIZER_INSTRUCTION = (
    'Based on the following event status description, categorize it as either '
    '"past", "future", or "none". Respond with only one of these three words.'
)

CATEGORIZER_USER = CATEGORIZER_INSTRUCTION + "\n\nDescription: {description}"

# ============================================================
# QUESTION GENERATOR
# ============================================================

QUESTIONS_SYSTEM = (
    "Vous êtes un assistant qui génère des questions adaptées pour expliquer un sujet "
    "à un public spécifique en français. Générez {count} questions ou prompts pertinents "
    "pour obtenir des informations faciles à comprendre sur un sujet donné. "
    "Adaptez les questions pour un public {audience} vivant en {country}."
)

QUESTIONS_USER = (
    'Générez {count} questions ou prompts en français pour expliquer "{topic}" '
    "à un public {audience} vivant en {country}. "
)

PAST_ONLY_INSTRUCTION = (
    "Comme il s'agit d'un événement passé, concentrez-vous uniquement sur ce qui s'est passé, "
    "les résultats et l'impact. N'incluez aucune question sur les attentes futures "
    "ou sur ce qui va se passer. "
)

FUTURE_ONLY_INSTRUCTION = (
    "Comme il s'agit d'un événement à venir, concentrez-vous uniquement sur les attentes, "
    "les préparatifs et ce qui pourrait se passer. N'incluez aucune question "
    "sur ce qui s'est déjà passé. "
)

GENERAL_INSTRUCTION = (
    "Comme il ne s'agit pas d'un événement spécifique ou que son statut temporel est incertain, "
    "posez des questions générales sur le sujet. "
)

LABEL_SYSTEM_HINTS: Dict[EventLabel, str] = {
    EventLabel.PAST: " Le sujet est un événement passé. Adaptez les questions en conséquence.",
    EventLabel.FUTURE: " Le sujet est un événement à venir. Adaptez les questions en conséquence.",
    EventLabel.NONE: (
        " Le sujet n'est pas un événement spécifique ou son statut temporel est incertain. "
        "Les questions peuvent être au présent."
    ),
}

LABEL_USER_DIRECTIVES: Dict[EventLabel, str] = {
    EventLabel.PAST: PAST_ONLY_INSTRUCTION,
    EventLabel.FUTURE: FUTURE_ONLY_INSTRUCTION,
    EventLabel.NONE: GENERAL_INSTRUCTION,
}

QUESTIONS_USER_CLOSING = (
    "Les questions doivent être adaptées au niveau de compréhension et aux intérêts "
    "d'un public {audience}. Assurez-vous que chaque question est cohérente avec le statut "
    "temporel de l'événement (passé, futur, ou présent) et pertinente pour ce public vivant "
    "en {country}. Répondez uniquement avec la liste numérotée des questions, sans autre texte."
)

# ============================================================
# RESEARCH ANSWERER
# ============================================================

RESEARCH_SYSTEM_PROMPT = (
    "Vous êtes un assistant utile qui explique des concepts à un enfant de 9 ans en français. "
    "Utilisez un langage simple et des exemples concrets."
)

# ============================================================
# SCRIPT WRITER
# ============================================================

AUDIENCE_DESCRIPTIONS: Dict[Audience, str] = {
    Audience.PRIMARY_SCHOOL: "âgés de 6 à 11 ans",
    Audience.HIGH_SCHOOL: "âgés de 12 à 18 ans",
    Audience.TECH_SAVVY: "passionnés de technologie",
    Audience.ELDERLY: "seniors de plus de 65 ans",
    Audience.YOUNG_ADULTS: "jeunes adultes curieux entre 18 et 30 ans",
}

AUDIENCE_GUIDANCE: Dict[Audience, str] = {
    Audience.PRIMARY_SCHOOL: (
        "Pour les enfants du primaire : utilisez un langage simple, des explications courtes "
        "et des analogies avec leur vie quotidienne."
    ),
    Audience.HIGH_SCHOOL: (
        "Pour les lycéens : incluez plus de détails, des faits intéressants et des liens "
        "avec leurs études ou l'actualité."
    ),
    Audience.TECH_SAVVY: (
        "Pour les passionnés de technologie : utilisez des termes techniques appropriés et faites "
        "des références à l'innovation et aux tendances actuelles."
    ),
    Audience.ELDERLY: (
        "Pour les seniors : utilisez un langage clair, évitez le jargon, et faites des liens "
        "avec l'histoire ou leur expérience de vie."
    ),
    Audience.YOUNG_ADULTS: (
        "Pour les jeunes adultes : adoptez un ton dynamique, incluez des anecdotes intéressantes "
        "et des applications pratiques du sujet."
    ),
}

SCRIPT_PROMPT = """Vous êtes un scénariste de podcast éducatif spécialisé pour un public {audience_description} vivant en {country}.
Utilisez les informations suivantes pour créer un script de podcast éducatif et divertissant en français.
Le script doit être engageant et adapté au niveau de compréhension de ce public spécifique.

Considérations importantes :
{guidance}

Incluez des éléments interactifs ou des questions rhétoriques pour garder l'attention de l'auditeur.
Le script doit durer environ 5 minutes à la lecture.

Informations à utiliser : {information}

Format suggéré :
1. Introduction accrocheuse adaptée au public
2. Présentation du sujet principal
3. Développement des points clés de manière adaptée à l'audience
4. Inclusion d'éléments interactifs ou de questions rhétoriques
5. Conclusion résumant les points principaux et encourageant la réflexion ou l'action

Commencez directement avec le script, sans ajouter d'explications supplémentaires."""

# ============================================================
# IMAGE PROMPT COMPOSER
# ============================================================

IMAGE_PROMPT_SYSTEM = (
    "You are an AI assistant specialized in creating prompts for high-quality, realistic image "
    "generation. Your task is to create a prompt that will result in a vivid, detailed photograph "
    "or illustration suitable for a children's educational podcast. Focus on creating imaginative "
    "scenes, rich environments, or intriguing objects that represent the podcast's content. "
    "Do not include children or people in the image description. Instead, focus on landscapes, "
    "animals, objects, or abstract concepts that children would find fascinating. Use specific "
    "details about lighting, perspective, and style to enhance the prompt."
)

IMAGE_PROMPT_USER = """Based on the following summary of a French podcast for 9-year-old children, generate a single, detailed prompt in English for an image generation model. The prompt should describe a captivating scene or concept that illustrates the content of the podcast without depicting any people.

Summary of the podcast: {summary}

Create a prompt that includes the following elements:
1. A clear subject or focal point related to the podcast topic
2. Vivid details about the environment or setting
3. Specific lighting conditions (e.g., "golden hour sunlight", "soft moonlight", "dramatic studio lighting")
4. Style or medium suggestions (e.g., "photorealistic", "watercolor style", "isometric digital art")
5. Mood or atmosphere descriptors
6. Camera angle or perspective, if relevant
7. Any relevant textures or materials

Format your response as a single paragraph, starting with the main subject and followed by descriptive details. Do not use bullet points or numbered lists in the final prompt. This is prompt number {number} of {total}.

Remember to respond ONLY with the prompt, without any additional text or explanations."""

IMAGE_PROMPT_PLACEHOLDER = "Error generating image prompt {number}"

# ============================================================
# IMAGE RENDERER
# ============================================================

NEGATIVE_PROMPT = (
    "child, children, person, people, human, blurry, distorted, disfigured, "
    "low quality, cartoon, anime, illustration"
)

RENDER_SETTINGS = {
    "num_inference_steps": 50,
    "guidance_scale": 7.5,
    "negative_prompt": NEGATIVE_PROMPT,
    "width": 896,
    "height": 672,
}


def build_question_directives(request: PodcastRequest, label: EventLabel) -> Tuple[str, str]:
    """Return the (system, user) directives for the question batch."""
    system_prompt = QUESTIONS_SYSTEM.format(
        count=QUESTION_COUNT,
        audience=request.audience,
        country=request.country,
    ) + LABEL_SYSTEM_HINTS[label]

    user_prompt = (
        QUESTIONS_USER.format(
            count=QUESTION_COUNT,
            topic=request.topic,
            audience=request.audience,
            country=request.country,
        )
        + LABEL_USER_DIRECTIVES[label]
        + QUESTIONS_USER_CLOSING.format(audience=request.audience, country=request.country)
    )
    return system_prompt, user_prompt


def describe_audience(audience: str) -> str:
    """Audience description for the script directive; unknown audiences pass through."""
    return AUDIENCE_DESCRIPTIONS.get(audience, audience)


def build_script_prompt(answers: List[str], audience: str, country: str) -> str:
    guidance = "\n".join(f"- {line}" for line in AUDIENCE_GUIDANCE.values())
    return SCRIPT_PROMPT.format(
        audience_description=describe_audience(audience),
        country=country,
        guidance=guidance,
        information=" ".join(answers),
    )


def build_image_prompt_request(summary: str, number: int) -> str:
    return IMAGE_PROMPT_USER.format(summary=summary, number=number, total=IMAGE_PROMPT_COUNT)


def image_prompt_placeholder(number: int) -> str:
    return IMAGE_PROMPT_PLACEHOLDER.format(number=number)
