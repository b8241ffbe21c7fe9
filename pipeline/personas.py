"""Content personas: phrase banks, formatters, tone checklists, templates.

A persona is a named writing voice ("ariastar", "specialist_mentor", ...).
`professional` is the neutral default and carries no traits. Generated
content is post-processed with `enhance_with_persona_traits`, which drops a
context statistic and a few signature phrases into the text.
"""

from __future__ import annotations

import random
import re
from datetime import datetime
from typing import Callable

from prompts.persona_templates import (
    ARIASTAR_TEMPLATE_EN,
    ARIASTAR_TEMPLATE_ES,
    SHORT_TEMPLATES,
    TEMPLATE_TEXT,
)

DEFAULT_STYLE = "professional"

PERSONA_DISPLAY_NAMES = {
    "ariastar": "AriaStar",
    "specialist_mentor": "MentorPro",
    "ai_collaborator": "AIInsight",
    "sustainable_advocate": "EcoEssence",
    "data_visualizer": "DataStory",
    "multiverse_curator": "NexusVerse",
    "ethical_tech": "TechTranslate",
    "niche_community": "CommunityForge",
    "synthesis_maker": "SynthesisSage",
}

PERSONAS = tuple(PERSONA_DISPLAY_NAMES)


def get_persona_display_name(style: str) -> str:
    return PERSONA_DISPLAY_NAMES.get(style, style)


# ---------------------------------------------------------------------------
# Phrase banks
# ---------------------------------------------------------------------------

PHRASES: dict[str, dict[str, list[str]]] = {
    "specialist_mentor": {
        "en": [
            "As a specialist in this field, I can confirm that",
            "Based on my experience with hundreds of clients,",
            "A common mistake I frequently observe is",
            "The proven methodology for addressing this includes",
            "From an expert perspective, I would recommend",
            "Experienced professionals in this domain know that",
            "When mentoring my clients, I always emphasize",
            "Specialized research demonstrates that",
            "The most effective approach I've developed is",
            "A fundamental principle in this area is",
            "After years of practical experience, I've found that",
            "An advanced strategy I recommend is",
            "The key difference between beginners and experts is",
            "A relevant case study that illustrates this:",
        ],
        "es": [
            "Como especialista en este campo, puedo afirmar que",
            "Basado en mi experiencia con cientos de clientes,",
            "Un error común que observo con frecuencia es",
            "La metodología probada para abordar esto incluye",
            "Desde una perspectiva de experto, recomendaría",
            "Los profesionales experimentados en este ámbito saben que",
            "Cuando asesoro a mis clientes, siempre enfatizo",
            "La investigación especializada demuestra que",
            "El enfoque más efectivo que he desarrollado es",
            "Un principio fundamental en esta área es",
            "Tras años de experiencia práctica, he descubierto que",
            "Una estrategia avanzada que recomiendo es",
            "La diferencia clave entre principiantes y expertos es",
            "Un caso de estudio relevante que ilustra esto:",
        ],
    },
    "niche_community": {
        "en": [
            "Our community's unique perspective on this is",
            "Fellow [niche] enthusiasts will appreciate",
            "As someone deeply embedded in this community,",
            "This is what sets our community apart:",
            "The inside scoop that only community members know:",
            "This resonates specifically with our values of",
            "Our shared journey through this has taught us",
            "The collective wisdom of our community suggests",
            "The micro-trends we're seeing within our community",
            "Speaking our community's language,",
            "The unwritten rules we've developed around this:",
            "Our community's distinctive approach to this is",
            "The cultural nuances that make this significant to us:",
            "We've cultivated a unique perspective on this:",
        ],
        "es": [
            "La perspectiva única de nuestra comunidad sobre esto es",
            "Los entusiastas de [nicho] apreciarán",
            "Como alguien profundamente integrado en esta comunidad,",
            "Esto es lo que distingue a nuestra comunidad:",
            "La información privilegiada que solo los miembros de la comunidad conocen:",
            "Esto resuena específicamente con nuestros valores de",
            "Nuestro viaje compartido a través de esto nos ha enseñado",
            "La sabiduría colectiva de nuestra comunidad sugiere",
            "Las micro-tendencias que estamos viendo dentro de nuestra comunidad",
            "Hablando el lenguaje de nuestra comunidad,",
            "Las reglas no escritas que hemos desarrollado en torno a esto:",
            "El enfoque distintivo de nuestra comunidad para esto es",
            "Los matices culturales que hacen que esto sea significativo para nosotros:",
            "Hemos cultivado una perspectiva única sobre esto:",
        ],
    },
    "ariastar": {
        "en": [
            "Ever notice how [topic] feels like trying to solve a Rubik's cube blindfolded?",
            "Think of this like your personal WiFi connection - when it's optimized, everything just works!",
            "It's like having all these amazing tools at your disposal, but nobody's showing you the best way to use them!",
            "Because your journey should be more 'wow' and less 'ow'!",
            "The game-changer that makes everything else seem ordinary",
            "Your new BFF in the world of [topic]",
            "Quick question - when was the last time [topic] actually made you excited to wake up?",
            "Here's my wild truth: sometimes the simplest shift creates the biggest transformation",
            "If you're nodding your head right now, know you're not alone",
            "I see you trying to make this work - and it's harder than it should be",
            "We're all figuring this out together, one step at a time",
            "That feeling when you think you're the only one struggling? Not true.",
            "Let's tackle this together - because nobody should have to figure it out alone",
        ],
        "es": [
            "¿Alguna vez has notado cómo [topic] se siente como tratar de resolver un cubo de Rubik con los ojos vendados?",
            "Piensa en esto como tu conexión WiFi personal - ¡cuando está optimizada, todo funciona!",
            "¡Es como tener todas estas increíbles herramientas a tu disposición, pero nadie te muestra la mejor manera de usarlas!",
            "¡Porque tu camino debería tener más 'guau' y menos 'ay'!",
            "El cambio revolucionario que hace que todo lo demás parezca ordinario",
            "Tu nuevo mejor amigo en el mundo de [topic]",
            "Pregunta rápida - ¿cuándo fue la última vez que [topic] te emocionó al despertar?",
            "Aquí está mi verdad cruda: a veces el cambio más simple crea la transformación más grande",
            "Si estás asintiendo ahora mismo, debes saber que no estás solo",
            "Te veo intentando hacer que esto funcione - y es más difícil de lo que debería ser",
            "Estamos descubriendo esto juntos, un paso a la vez",
            "¿Esa sensación cuando piensas que eres el único con dificultades? No es cierto.",
            "Abordemos esto juntos - porque nadie debería tener que resolverlo solo",
        ],
    },
    "data_visualizer": {
        "en": [
            "The visualization reveals an interesting pattern:",
            "Looking closely at this data, we notice",
            "The emerging trend in these numbers suggests",
            "When we visualize this data, we discover",
            "The key metrics that stand out are",
            "The insights we can extract from these visualizations:",
            "By representing this data visually, we see",
            "The bigger picture these data points show us is",
            "The story these numbers tell us is",
            "Breaking down this data by key variables:",
            "What these charts reveal about [topic]:",
            "These data points offer a unique perspective on",
            "The most significant correlations in this data:",
            "When we turn these numbers into pictures, an insight emerges:",
        ],
        "es": [
            "La visualización revela un patrón interesante:",
            "Observando de cerca estos datos, notamos",
            "La tendencia emergente en estos números sugiere",
            "Cuando visualizamos estos datos, descubrimos",
            "Las métricas clave que destacan son",
            "Los insights que podemos extraer de estas visualizaciones:",
            "Representando estos datos visualmente, vemos",
            "El panorama completo que estos datos nos muestran es",
            "La historia que estos números nos cuentan es",
            "Desglosando estos datos por variables clave:",
            "Lo que estos gráficos revelan acerca de [tema]:",
            "Estos puntos de datos ofrecen una perspectiva única sobre",
            "Las correlaciones más significativas en estos datos:",
            "Cuando convertimos estos números en imágenes, emerge un insight:",
        ],
    },
    "synthesis_maker": {
        "en": [
            "Connecting the dots between diverse disciplines,",
            "At the intersection of [field 1] and [field 2], we find",
            "The patterns that emerge from this synthesis are",
            "Weaving together these disparate elements,",
            "The key insight emerges when we combine",
            "This hybrid perspective reveals",
            "Breaking down the traditional silos between",
            "When we take a transdisciplinary approach,",
            "The meta-pattern connecting these concepts is",
            "The synthesis of these seemingly unrelated ideas suggests",
            "An integrative framework for understanding this would be",
            "The strength of this hybrid approach is",
            "The unexpected connections between these domains offer",
            "Mapping the relationships between these concepts,",
        ],
        "es": [
            "Conectando los puntos entre disciplinas diversas,",
            "En la intersección de [campo 1] y [campo 2], encontramos",
            "Los patrones que emergen de esta síntesis son",
            "Tejiendo juntos estos elementos dispares,",
            "El insight clave surge cuando combinamos",
            "Esta nueva perspectiva híbrida revela",
            "Rompiendo los silos tradicionales entre",
            "Cuando adoptamos un enfoque transdisciplinario,",
            "El meta-patrón que conecta estos conceptos es",
            "La síntesis de estas ideas aparentemente no relacionadas sugiere",
            "Un marco integrador para entender esto sería",
            "La fortaleza de este enfoque híbrido es",
            "Las conexiones inesperadas entre estos dominios ofrecen",
            "Mapeando las relaciones entre estos conceptos,",
        ],
    },
    "sustainable_advocate": {
        "en": [
            "From a sustainability perspective,",
            "A regenerative approach to [topic] would include",
            "The environmental impact of this cannot be ignored:",
            "Considering our planetary responsibility,",
            "To create a more resilient future, we should",
            "From a triple-bottom-line perspective:",
            "Balancing human needs with planetary boundaries,",
            "The true environmental cost of this practice is",
            "A more sustainable alternative would be",
            "Future generations would benefit if we",
            "Environmental justice requires us to consider",
            "Beyond sustainability, we can aspire to",
            "This regenerative approach doesn't just prevent harm - it restores",
            "Transforming our approach to [topic] could create",
        ],
        "es": [
            "Desde una perspectiva de sostenibilidad,",
            "Un enfoque regenerativo para [tema] incluiría",
            "El impacto ambiental de esto no puede ignorarse:",
            "Considerando nuestra responsabilidad planetaria,",
            "Para crear un futuro más resiliente, deberíamos",
            "Desde un punto de vista de triple impacto:",
            "Equilibrando las necesidades humanas con los límites planetarios,",
            "El verdadero costo ambiental de esta práctica es",
            "Una alternativa más sostenible sería",
            "Las generaciones futuras se beneficiarían si nosotros",
            "La justicia ambiental requiere que consideremos",
            "Más allá de la sostenibilidad, podemos aspirar a",
            "Este enfoque regenerativo no solo evita daños, sino que restaura",
            "Transformar nuestro enfoque de [tema] podría generar",
        ],
    },
    "ai_collaborator": {
        "en": [
            "As a human-AI collaboration, we can",
            "With our combined abilities, we've discovered",
            "The synergy of our collaboration reveals",
            "What makes this collaborative approach unique is",
            "Together, we're exploring the boundaries of",
            "The value in our human-AI partnership lies in",
            "Our complementary perspectives allow us to",
            "As we work together on this topic, we notice",
            "The interplay between human intuition and AI processing shows",
            "We're co-creating a new understanding of",
            "This collaboration illuminates aspects of [topic] that neither human nor AI could see alone",
            "What emerges from our open dialogue is",
            "Our creative alliance produces insights that",
            "The dynamic between our different ways of thinking reveals",
        ],
        "es": [
            "Como colaboración entre humano y IA, podemos",
            "Con nuestras habilidades combinadas, hemos descubierto",
            "La sinergia de nuestra colaboración revela",
            "Lo que hace que este enfoque de colaboración sea único es",
            "Juntos, estamos explorando los límites de",
            "El valor de nuestra asociación humano-IA radica en",
            "Nuestras perspectivas complementarias nos permiten",
            "Mientras trabajamos juntos en este tema, notamos",
            "La interacción entre intuición humana y procesamiento de IA muestra",
            "Estamos co-creando un nuevo entendimiento de",
            "Esta colaboración ilumina aspectos de [tema] que ni humano ni IA podrían ver solos",
            "Lo que emerge de nuestro diálogo abierto es",
            "Nuestra alianza creativa produce ideas que",
            "La dinámica entre nuestras diferentes formas de pensar revela",
        ],
    },
    "multiverse_curator": {
        "en": [
            "Through multiple perspectives, we see that",
            "If we reframe [topic] from different angles,",
            "The interesting paradox here is",
            "In a parallel universe, [topic] might be viewed as",
            "Exploring the creative tensions between [x] and [y],",
            "Let's navigate between these seemingly contradictory realities:",
            "The plurality of viewpoints reveals that",
            "If we invert our usual perspective,",
            "This apparent contradiction actually reveals",
            "The marginal perspectives that illuminate this topic include",
            "Let me unfold multiple interpretations:",
            "The conceptual map of this territory shows",
            "Weaving these different perspectives together, what emerges is",
            "At the intersection of these divergent ideas,",
        ],
        "es": [
            "A través de múltiples perspectivas, vemos que",
            "Si reenmarcamos [tema] desde diferentes ángulos,",
            "La paradoja interesante aquí es",
            "En un universo paralelo, [tema] podría ser visto como",
            "Explorando las tensiones creativas entre [x] y [y],",
            "Naveguemos entre estas realidades aparentemente contradictorias:",
            "La pluralidad de puntos de vista nos revela que",
            "Si invertimos nuestra perspectiva habitual,",
            "Esta contradicción aparente en realidad revela",
            "Las perspectivas marginales que iluminan este tema incluyen",
            "Permíteme desplegar múltiples interpretaciones:",
            "El mapa conceptual de este territorio muestra",
            "Tejiendo estas perspectivas diferentes, emerge",
            "En la intersección de estas ideas divergentes,",
        ],
    },
    "ethical_tech": {
        "en": [
            "From an ethical technology perspective,",
            "Considering human values at the center of this technology,",
            "The ethical implications we need to consider include",
            "A human-centered approach would suggest",
            "To ensure this technology benefits everyone,",
            "Navigating this technical-ethical dilemma,",
            "Evaluating both intended and unintended effects,",
            "The key equity questions that arise are",
            "At the intersection of technical innovation and human wellbeing,",
            "How might we balance technological progress with",
            "When designing technical systems with ethical intent,",
            "The technological justice framework invites us to consider",
            "The principles of transparency and accountability here mean",
            "Expanding equitable access to this technology,",
        ],
        "es": [
            "Desde una perspectiva de tecnología ética,",
            "Considerando los valores humanos en el centro de esta tecnología,",
            "Las implicaciones éticas que debemos considerar incluyen",
            "Un enfoque centrado en el ser humano sugeriría",
            "Para garantizar que esta tecnología beneficie a todos,",
            "Navegando este dilema técnico-ético,",
            "Evaluando los efectos tanto intencionados como no intencionados,",
            "Las preguntas clave de equidad que surgen son",
            "En la intersección de innovación técnica y bienestar humano,",
            "¿Cómo podemos equilibrar el progreso tecnológico con",
            "Al diseñar sistemas técnicos con intencionalidad ética,",
            "El marco de justicia tecnológica nos invita a considerar",
            "Los principios de transparencia y rendición de cuentas aquí significan",
            "Ampliando el acceso equitativo a esta tecnología,",
        ],
    },
}


def get_persona_phrases(style: str, language: str = "en") -> list[str]:
    """Phrase bank for a persona; Spanish when available, English otherwise."""
    bank = PHRASES.get(style)
    if not bank:
        return []
    return list(bank.get(language) or bank["en"])


# ---------------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------------

def _bullets(items, render) -> str:
    return "\n".join(render(item) for item in items)


def _metrics(heading: str, suffix: str = ""):
    def render(metrics: list[dict]) -> str:
        body = _bullets(metrics, lambda m: f"• {m['label']}: {m['value']}{suffix}")
        return f"{heading}:\n{body}\n\n"
    return render


def _section(tag: str, trailer: str = "\n\n"):
    return lambda title, content: f"## {title} ({tag})\n{content}{trailer}"


def _ariastar_section(title: str, content: str) -> str:
    lowered = title.lower()
    emoji = "✨"
    if "tip" in lowered or "how" in lowered:
        emoji = "💫"
    if "result" in lowered or "benefit" in lowered:
        emoji = "🔥"
    if "question" in lowered or "wonder" in lowered:
        emoji = "🤔"
    return f"# {title} {emoji}\n{content}\n\n"


_ARIASTAR_STORIES = [
    "When I first implemented this in my own workflow, I was skeptical. One month later, my team was asking what changed!",
    "I remember trying three different tools before finding the one that actually stuck. The difference? It felt human.",
    "My own journey with this started with total overwhelm. Now I can't imagine working any other way.",
    "Last year, I hit a wall with my productivity system. Everything felt like a chore until I discovered this approach.",
    "I was that person with 47 browser tabs open and a to-do list longer than my patience. Not anymore.",
]

_ARIASTAR_PS = [
    "P.S. Remember when we thought more {topic} would automatically mean better results? Turns out the magic happens when we choose quality over quantity. Your future self is already thanking you for making this shift!",
    "P.S. The most powerful {topic} shift isn't about adding more complexity. It's about making space for what truly matters. And you're already one step ahead just by being here!",
    "P.S. Still feeling overwhelmed about {topic}? Start with just ONE change. That's how every transformation begins. Your future self is already grateful you started today!",
]

_ARIASTAR_QUESTIONS = [
    "Which of these challenges sounds most like your day?",
    "Have you ever found yourself staring at your screen wondering where the day went?",
    "What if you could get back 5 hours of your week - what would you do with that time?",
    "Does any of this sound familiar, or is it just me?",
    "Which part of your workflow causes the most frustration right now?",
]

FORMATTERS: dict[str, dict[str, Callable[..., str]]] = {
    "specialist_mentor": {
        "sections": _section("Expert Guidance", trailer=""),
        "results": _metrics("EXPERT ANALYSIS", " (validated by field specialists)"),
        "cta": lambda service, benefit: (
            f"Work with our specialized {service} experts to {benefit}. Our proven methodology "
            "delivers results that 76% of clients rate as superior to previous approaches."
        ),
        "contrast": lambda topic: (
            f"While generalized approaches to {topic} often miss critical nuances, our specialized "
            "expert framework addresses the key factors that most practitioners overlook.\n\n"
        ),
        "expert_tip": lambda tip: f"**EXPERT TIP**: {tip}\n\n",
        "common_mistake": lambda mistake, correction: (
            f"**COMMON MISTAKE**: {mistake}\n**CORRECT APPROACH**: {correction}\n\n"
        ),
        "case_study": lambda scenario, approach, outcome: (
            f"**CASE STUDY**:\n**Scenario**: {scenario}\n**Expert Approach**: {approach}\n**Outcome**: {outcome}\n\n"
        ),
        "advanced_concept": lambda concept, explanation: f"**ADVANCED CONCEPT**: {concept}\n{explanation}\n\n",
        "field_specific": lambda term, definition: f'**FIELD TERMINOLOGY**: "{term}" - {definition}\n\n',
    },
    "niche_community": {
        "sections": _section("Community Insights"),
        "results": _metrics("COMMUNITY CONSENSUS", " (based on community feedback)"),
        "cta": lambda service, benefit: (
            f"Join our community of passionate {service} enthusiasts and discover how our shared "
            f"experience can help you {benefit}. You'll find the support, insights, and connections "
            "you won't get anywhere else."
        ),
        "contrast": lambda topic: (
            f"Unlike mainstream approaches to {topic} that miss the nuanced context, our community has "
            "developed specialized practices that reflect our unique values and priorities.\n\n"
        ),
        "community_spotlight": lambda member, contribution: (
            f"**COMMUNITY SPOTLIGHT**: {member} exemplifies our values through their {contribution}\n\n"
        ),
        "ritual_explained": lambda ritual, meaning: (
            f"**INSIDER RITUAL**: The practice of {ritual} holds special significance among us because {meaning}\n\n"
        ),
        "member_poll": lambda question, options: (
            f'**COMMUNITY POLL**: "{question}"\n'
            + _bullets(options, lambda o: f"• {o['option']}: {o['percentage']}")
            + "\n\n"
        ),
        "insider_glossary": lambda terms: (
            "**COMMUNITY GLOSSARY**:\n"
            + _bullets(terms, lambda t: f"**{t['term']}**: {t['definition']}")
            + "\n\n"
        ),
        "microsegment_insight": lambda segment, characteristics, needs: (
            f"**MICRO-SEGMENT INSIGHT**: Within our {segment} members, we've noticed {characteristics}. "
            f"Their specific needs include {needs}.\n\n"
        ),
    },
    "ariastar": {
        "sections": _ariastar_section,
        "results": _metrics("✨ Quick Results"),
        "cta": lambda service, benefit: (
            f"Ready to transform your experience with {service}? Let's turn chaos into clarity! "
            f"Visit our website or message me to get started with {benefit} today. "
            "P.S. Your future self is already thanking you!"
        ),
        "contrast": lambda topic: (
            f"Unlike typical {topic} approaches that just add more complexity, here's a fresh perspective.\n\n"
        ),
        "new_section": lambda topic: f"✨ Let's talk about {topic} ✨\n\n",
        "insight": lambda: "Here's my wild truth: ",
        "takeaway": lambda: "The game-changer here? ",
        "action": lambda: "Your next simple shift: ",
        "example": lambda: "Picture this scenario: ",
        "pain_point": lambda topic: f"Ever find yourself drowning in {topic} options but still feeling stuck?\n\n",
        "question": lambda topic: (
            f"What if your approach to {topic} could actually create more joy, not just more output?\n\n"
        ),
        "story": lambda topic: (
            f"I used to think mastering {topic} meant doing more, faster. Then something changed.\n\n"
        ),
        "stat": lambda metric, value: (
            f"Did you know that {value} of professionals struggle with {metric}? You're not alone.\n\n"
        ),
        "personal_story": lambda: random.choice(_ARIASTAR_STORIES),
        "memorable_ps": lambda topic: "\n\n" + random.choice(_ARIASTAR_PS).format(topic=topic),
        "interactive_question": lambda: random.choice(_ARIASTAR_QUESTIONS),
    },
    "data_visualizer": {
        "sections": _section("Data Insight"),
        "results": _metrics("KEY METRICS"),
        "cta": lambda service, benefit: (
            f"Explore how our data-driven {service} can help you {benefit}. Make informed decisions "
            "based on clear visual insights rather than gut feelings."
        ),
        "contrast": lambda topic: (
            f"While most discussions about {topic} rely on anecdotes or opinions, our data-driven "
            "approach reveals measurable patterns and evidence-based insights that paint a more "
            "accurate picture.\n\n"
        ),
        "trend_analysis": lambda trend, insight: (
            f"**TREND ANALYSIS**:\n**Trend:** {trend}\n**Key Insight:** {insight}\n\n"
        ),
        "data_comparison": lambda items: (
            "**DATA COMPARISON**:\n"
            + _bullets(
                sorted(items, key=lambda i: i["value"], reverse=True),
                lambda i: f"• {i['name']}: {i['value']} ({i['context']})",
            )
            + "\n\n"
        ),
        "methodology_note": lambda source, sample, timeframe: (
            f"**METHODOLOGY NOTE**:\n• Data Source: {source}\n• Sample: {sample}\n• Timeframe: {timeframe}\n\n"
        ),
        "key_metric": lambda metric, value, context: f"**KEY METRIC**: {metric}: {value}\n{context}\n\n",
        "data_story": lambda narrative: f"**THE STORY BEHIND THE DATA**:\n{narrative}\n\n",
        "actionable_insight": lambda insight, action: (
            f"**ACTIONABLE INSIGHT**:\n• What We See: {insight}\n• Recommended Action: {action}\n\n"
        ),
    },
    "synthesis_maker": {
        "sections": _section("Integrated Perspective"),
        "results": _metrics("SYNTHESIS INSIGHTS"),
        "cta": lambda service, benefit: (
            f"Explore how our integrated approach to {service} can help you {benefit}. By weaving "
            "together diverse perspectives, we create solutions that address complex challenges holistically."
        ),
        "contrast": lambda topic: (
            f"Unlike siloed approaches to {topic} that miss crucial connections, our synthesis method "
            "reveals the rich patterns and insights that emerge when we integrate knowledge across boundaries.\n\n"
        ),
        "connection_map": lambda elements: (
            "**CROSS-DISCIPLINARY INSIGHT**:\n"
            + _bullets(elements, lambda e: f"• {e['domain']}: {e['insight']}")
            + "\n\n"
        ),
        "pattern_recognition": lambda pattern, examples: (
            f"**PATTERN ANALYSIS**: {pattern}\n" + _bullets(examples, lambda e: f"• {e}") + "\n\n"
        ),
        "paradigm_shift": lambda old_view, new_view: f"**CONCEPT MAP**:\n• From: {old_view}\n• To: {new_view}\n\n",
        "meta_framework": lambda framework, components: (
            f"**INTEGRATIVE FRAMEWORK**: {framework}\n"
            + "\n".join(f"{i}. {c['component']}: {c['purpose']}" for i, c in enumerate(components, 1))
            + "\n\n"
        ),
        "cross_pollination": lambda source, target, application: (
            f"**META-INSIGHT**:\n• Source: {source}\n• Target: {target}\n• Application: {application}\n\n"
        ),
    },
    "sustainable_advocate": {
        "sections": _section("Regenerative Perspective"),
        "results": _metrics("SUSTAINABILITY METRICS"),
        "cta": lambda service, benefit: (
            f"Explore how our regenerative approach to {service} can help you {benefit} while creating "
            "positive environmental and social impact. Make choices that future generations will thank you for."
        ),
        "contrast": lambda topic: (
            f"Unlike conventional approaches to {topic} that focus solely on short-term gains while "
            "ignoring environmental costs, our regenerative method creates positive ripple effects for "
            "both people and planet.\n\n"
        ),
        "reflection_prompt": lambda question: f"**IMPACT ASSESSMENT**: {question}\n\n",
        "impact_metric": lambda action, impact: f"**REGENERATIVE PRINCIPLE**: {action}\n{impact}\n\n",
        "values_principle": lambda principle: f"**SYSTEMS THINKING**: {principle}\n\n",
        "small_shift": lambda current, alternative: (
            f"**FUTURE BENEFITS**:\n• Current: {current}\n• Alternative: {alternative}\n\n"
        ),
        "resource_list": lambda resources: (
            "**BIODIVERSITY IMPACT**:\n"
            + _bullets(resources, lambda r: f"• {r['name']}: {r['benefit']}")
            + "\n\n"
        ),
    },
    "ai_collaborator": {
        "sections": _section("Collaborative Insights"),
        "results": _metrics("COLLABORATIVE FINDINGS"),
        "cta": lambda service, benefit: (
            f"Explore how our human-AI partnership can help you {benefit} through our {service}. "
            "Together, we can achieve outcomes that neither could accomplish alone."
        ),
        "contrast": lambda topic: (
            f"While traditional approaches to {topic} rely on either purely human or purely automated "
            "systems, our collaborative method combines the strengths of both to overcome the "
            "limitations inherent in each.\n\n"
        ),
        "process_breakdown": lambda steps: (
            "**COMPLEMENTARY PERSPECTIVES**:\n"
            + "\n\n".join(
                f"• Human insight {i}: {s['human']}\n• AI analysis {i}: {s['ai']}"
                for i, s in enumerate(steps, 1)
            )
            + "\n\n"
        ),
        "ethical_note": lambda consideration: f"**COLLABORATIVE LEARNING**: {consideration}\n\n",
        "tools_used": lambda tools: (
            "**BREAKING NEW GROUND**: "
            + _bullets(tools, lambda t: f"• {t['name']}: {t['purpose']}")
            + "\n\n"
        ),
        "prompt_strategy": lambda prompt, reasoning: (
            f"**MULTIMODAL PATTERN**: Analysis of {prompt} reveals patterns suggesting {reasoning}\n\n"
        ),
        "alternatives_considered": lambda alternatives: (
            "**THOUGHT EXPERIMENT**:\n"
            + "\n".join(
                f"• Option {i}: {a['option']}\n  Exploration: {a['reason']}"
                for i, a in enumerate(alternatives, 1)
            )
            + "\n\n"
        ),
    },
    "multiverse_curator": {
        "sections": _section("Multiple Perspectives"),
        "results": _metrics("DIVERSE INTERPRETATIONS"),
        "cta": lambda service, benefit: (
            f"Explore how our multidimensional approach to {service} can help you {benefit}. Break free "
            "from single-framework thinking and discover solutions that embrace complexity."
        ),
        "contrast": lambda topic: (
            f"While conventional approaches to {topic} typically rely on a single dominant framework, our "
            "multiversal method reveals the richer patterns that emerge when we weave together diverse "
            "and even contradictory perspectives.\n\n"
        ),
        "perspective_shift": lambda from_perspective, to_perspective, insight: (
            f"**PERSPECTIVE SHIFT**:\nFrom: {from_perspective}\nTo: {to_perspective}\nInsight: {insight}\n\n"
        ),
        "polarities": lambda pole1, pole2, integration: (
            f"**CREATIVE TENSION**:\n• Pole 1: {pole1}\n• Pole 2: {pole2}\n• Integration: {integration}\n\n"
        ),
        "conceptual_lenses": lambda lenses: (
            "**CONCEPTUAL LENSES**:\n"
            + _bullets(lenses, lambda l: f"• Through the lens of {l['lens']}: {l['insight']}")
            + "\n\n"
        ),
        "paradox": lambda contradiction, truth: (
            f"**PARADOX EXPLORED**: While {contradiction}, a deeper truth emerges: {truth}\n\n"
        ),
        "metaphor_mapping": lambda concept, metaphors: (
            f"**METAPHOR CONSTELLATION** for {concept}:\n"
            + _bullets(metaphors, lambda m: f"• As {m['domain']}: {m['mapping']}")
            + "\n\n"
        ),
    },
    "ethical_tech": {
        "sections": _section("Ethical Perspective"),
        "results": _metrics("ETHICAL CONSIDERATIONS"),
        "cta": lambda service, benefit: (
            f"Explore how our ethically-designed {service} can help you {benefit} while upholding human "
            "dignity and wellbeing. Technology should serve humanity, not the other way around."
        ),
        "contrast": lambda topic: (
            f"Unlike conventional approaches to {topic} that prioritize efficiency and profit over human "
            "concerns, our ethical framework places human flourishing at the center of technological "
            "development.\n\n"
        ),
        "tech_translation": lambda technical, accessible: (
            f"**VALUE-ALIGNED PRACTICE**: {technical} means {accessible}\n\n"
        ),
        "ethical_spectrum": lambda benefits, risks: (
            f"**STAKEHOLDER CONSIDERATION**:\n• Potential benefits: {', '.join(benefits)}\n"
            f"• Areas of concern: {', '.join(risks)}\n\n"
        ),
        "key_questions": lambda questions: (
            "**ETHICAL TENSION**: " + "\n".join(f"{i}. {q}" for i, q in enumerate(questions, 1)) + "\n\n"
        ),
        "tech_timeline": lambda stage, timeline, implications: (
            f"**DESIGN PRINCIPLE**: {stage} - {timeline}\nImplementation: {implications}\n\n"
        ),
        "accessibility_note": lambda barriers, alternatives: (
            f"**EQUITY CONSIDERATION**:\nBarriers: {', '.join(barriers)}\nApproaches: {', '.join(alternatives)}\n\n"
        ),
    },
}


def get_persona_formatter(style: str, name: str) -> Callable[..., str] | None:
    return FORMATTERS.get(style, {}).get(name)


def format_section(title: str, content: str, style: str) -> str:
    formatter = get_persona_formatter(style, "sections")
    if formatter is None:
        return f"## {title}\n{content}\n\n"
    return formatter(title, content)


def format_results(metrics: list[dict], style: str) -> str:
    formatter = get_persona_formatter(style, "results")
    if formatter is None:
        return _metrics("RESULTS")(metrics)
    return formatter(metrics)


def format_cta(service: str, benefit: str, style: str) -> str:
    formatter = get_persona_formatter(style, "cta")
    if formatter is None:
        return f"Want to learn more about {service}? Contact us today to discover how our {benefit} can help you."
    return formatter(service, benefit)


def format_framework(steps: list[str], style: str) -> str:
    # No persona ships its own framework formatter yet
    formatter = get_persona_formatter(style, "framework")
    if formatter is None:
        return "FRAMEWORK:\n" + "\n".join(f"{i}. {step}" for i, step in enumerate(steps, 1)) + "\n\n"
    return formatter(steps)


# ---------------------------------------------------------------------------
# Tone checklists
# ---------------------------------------------------------------------------

def _patterns(*patterns: str) -> list[re.Pattern]:
    return [re.compile(p, re.IGNORECASE) for p in patterns]


# style -> (case-insensitive checks, how many must pass)
CHECKLISTS: dict[str, tuple[list[re.Pattern], int]] = {
    "specialist_mentor": (_patterns(
        r"\bexpert\w*\b|\bspecial\w*\b|\bprofessional\w*\b|\bexperien\w*\b",
        r"\brecommend\w*\b|\badvis\w*\b|\bsuggest\w*\b|\bpropos\w*\b",
        r"\bmethod\w*\b|\bapproach\w*\b|\bprocess\w*\b|\bstrateg\w*\b|\bsystem\w*\b",
        r"\bcommon \w+ mistake\w*\b|\berror\w*\b|\bmisconception\w*\b|\bchallenge\w*\b",
        r"\bcase stud\w*\b|\bexample\w*\b|\bscenario\w*\b|\binstance\w*\b",
        r"\bproven\b|\beffective\b|\bsuccessful\b|\bresult\w*\b",
        r"\bstep\w*\b|\bphase\w*\b|\bstage\w*\b|\bsequence\b",
        r"\bfundamental\w*\b|\bessential\w*\b|\bcritical\w*\b|\bkey\b",
    ), 4),
    "niche_community": (_patterns(
        r"\bour\b|\bwe\b|\bus\b|\bcommunity\b|\bgroup\b|\bcollective\b|\bmember",
        r"\bunique\b|\bdistinctive\b|\bspecial\b|\bparticular\b|\bdifferent\b|\bvaried\b",
        r"\bvalue[s]?\b|\bbelief[s]?\b|\bprinciple[s]?\b|\bethic[s]?\b|\bcult\w+\b",
        r"\binsider\b|\binside\b|\bwithin\b|\binternal\b|\bfellow\b|\bmember\b",
        r"\bshared\b|\bcollective\b|\btogether\b|\bcommon\b|\ball of us\b",
        r"\bmicro-\b|\bniche\b|\bsubtle\b|\bnuanced\b|\bspecific\b",
        r"\britual[s]?\b|\btradition[s]?\b|\bpractice[s]?\b|\bcustom[s]?\b",
        r"\bperception\b|\bperspective\b|\bviewpoint\b|\boutlook\b|\bstance\b",
    ), 3),
    "data_visualizer": (_patterns(
        r"\bdata\b|\bmetric\w*\b|\bnumber\w*\b|\bstatistic\w*\b|\bfigure\w*\b",
        r"\bvisuali[sz]e\b|\bchart\w*\b|\bgraph\w*\b|\bplot\w*\b|\bdiagram\w*\b",
        r"\btrend\w*\b|\bpattern\w*\b|\bcorrelation\w*\b|\brelationship\w*\b",
        r"\binsight\w*\b|\bfinding\w*\b|\bdiscover\w*\b|\breveal\w*\b",
        r"\banalysis\b|\banalyze\b|\bexamine\b|\bstudy\b",
        r"\bcompare\b|\bcomparison\b|\bcontrast\b|\bdifference\b",
        r"\bevidence\b|\bproof\b|\bsupport\b|\bverify\b",
        r"\bstory\b|\bnarrative\b|\btell\b|\bpicture\b",
    ), 3),
    "synthesis_maker": (_patterns(
        r"\bconnect\w*\b|\bintegrat\w*\b|\bcombine\w*\b|\bbridge\b|\blink\w*\b",
        r"\bdiverse\b|\bdifferent\b|\bdisparate\b|\bvarious\b|\bmultiple\b",
        r"\bpattern\w*\b|\bframework\w*\b|\bstructure\w*\b|\bmodel\w*\b",
        r"\binterdisciplin\w*\b|\btransdisciplin\w*\b|\bcross-\w*\b",
        r"\bemerge\w*\b|\barise\w*\b|\bappear\w*\b|\bsurface\b",
        r"\bsynthesis\b|\bsynthesi[sz]e\b|\bintegrat\w*\b|\bweav\w*\b",
        r"\binsight\w*\b|\brevelation\w*\b|\bdiscover\w*\b|\buncover\w*\b",
        r"\brelationship\w*\b|\binterconnect\w*\b|\bnetwork\w*\b",
    ), 3),
    "sustainable_advocate": (_patterns(
        r"\bsustain\w*\b|\bregener\w*\b|\bresilience\b|\brenew\w*\b",
        r"\benvironment\w*\b|\becolog\w*\b|\bnatur\w*\b|\bearth\b|\bplanet\w*\b",
        r"\bfuture\b|\blong-term\b|\bgenerations\b|\blegacy\b",
        r"\bimpact\b|\beffect\b|\bconsequence\b|\binfluence\b",
        r"\balternative\b|\bsolution\b|\bdifferent approach\b",
        r"\bsystem\w*\b|\bholistic\b|\binterconnect\w*\b|\brelationship\w*\b",
        r"\bresponsib\w*\b|\bethic\w*\b|\bmoral\b|\bvalues\b",
        r"\bchange\b|\btransform\w*\b|\bshift\b|\btransition\b",
    ), 3),
    "ai_collaborator": (_patterns(
        r"\btogether\b|\bjointly\b|\bcollaborat\w+\b|\bpartnership\b|\bco-creat\w+\b",
        r"\bhuman-AI\b|\bhuman and AI\b|\bpeople and machines\b|\bhuman-machine\b",
        r"\bcomplement\w+\b|\bsynerg\w+\b|\bcombined\b|\btogether\b",
        r"\binsight\w+\b|\bdiscover\w+\b|\bfind\w+\b|\buncover\w+\b|\bexplor\w+\b",
        r"\bemerge\w+\b|\bintersect\w+\b|\bconverge\w+\b|\bmeet\w+\b",
        r"\bwe\b|\bour\b|\bus\b",
        r"\bunique\b|\bdistinct\w+\b|\bdifferent\b|\bnovel\b",
        r"\bprocess\w+\b|\bmethod\w+\b|\bapproach\w+\b|\bsystem\w+\b",
    ), 3),
    "multiverse_curator": (_patterns(
        r"\bmultiple\b|\bdiverse\b|\bvarious\b|\bdifferent\b|\balternative\b",
        r"\bparadox\w*\b|\bcontradiction\b|\btension\b|\bopposite\b",
        r"\bperspective\w*\b|\bviewpoint\w*\b|\blens\w*\b|\bangle\w*\b|\bframe\w*\b",
        r"\breframe\b|\bshift\b|\btransform\b|\bchange\b|\balter\b",
        r"\bcomplex\w*\b|\bnuanced\b|\blayered\b|\bmulti-faceted\b",
        r"\bintegrat\w*\b|\bweav\w*\b|\bconnect\w*\b|\bbridge\b",
        r"\bmap\b|\bterritory\b|\blandscape\b|\bterrain\b",
        r"\bmetaphor\w*\b|\banalog\w*\b|\bcompar\w*\b|\bas if\b",
    ), 3),
    "ethical_tech": (_patterns(
        r"\bethic\w*\b|\bvalu\w*\b|\bmoral\w*\b|\bprinciple\w*\b",
        r"\bhuman\w*\b|\bpeople\b|\bperson\w*\b|\bindividual\w*\b",
        r"\bimpact\b|\beffect\b|\bconsequence\b|\bimplication\b",
        r"\bjustice\b|\bfair\w*\b|\bequit\w*\b|\baccess\w*\b",
        r"\btranspar\w*\b|\baccountab\w*\b|\bresponsib\w*\b",
        r"\bconsider\w*\b|\bexamine\b|\breflect\b|\bcontemplat\w*\b",
        r"\bdesign\w*\b|\bcreate\b|\bbuild\b|\bdevelop\b",
        r"\bbalance\b|\btrade-off\b|\bdilemma\b|\btension\b",
    ), 3),
}

ARIASTAR_REQUIRED = 4


def _ariastar_checks(content: str) -> list[bool]:
    """AriaStar's checklist is case-sensitive and looks at structure, not just vocabulary."""
    third = len(content) // 3
    emotional_arc = bool(
        re.search(r"frustrat|struggle|challeng|difficult|overwhelm", content[:third])
        and re.search(r"transform|chang|shift|realiz|discover", content[third:2 * third])
        and re.search(r"relief|better|improv|amaz|wow|excit", content[2 * third:])
    )
    return [
        "?" in content or "!" in content,
        bool(re.search(r"like|as if|imagine|think of|similar to", content)),
        any(len(s.strip()) < 20 for s in content.split(".")),
        any(len(p) < 100 for p in content.split("\n")),
        bool(re.search(r"\bwow\b|\bamazing\b|\bexcited\b|\bhappy\b|\bjoy\b|\bfun\b", content)),
        bool(re.search(r"\bwe\b|\bus\b|\btogether\b|\bnot alone\b|\bwe're all\b", content)),
        bool(re.search(r"\bI've been\b|\bmy own\b|\bI used to\b|\bI remember\b|\bWhen I\b", content)),
        emotional_arc,
        bool(re.search(r"Here's my wild truth|The game-changer|Your next simple shift|Picture this scenario", content)),
        "P.S." in content,
    ]


def check_persona_tone(content: str, style: str) -> dict:
    """Run a persona's tone checklist: {passed, score, required}.

    Styles without a checklist always pass.
    """
    if style == "ariastar":
        results, required = _ariastar_checks(content), ARIASTAR_REQUIRED
    elif style in CHECKLISTS:
        patterns, required = CHECKLISTS[style]
        results = [bool(p.search(content)) for p in patterns]
    else:
        return {"passed": True, "score": 0, "required": 0}
    score = sum(results)
    return {"passed": score >= required, "score": score, "required": required}


# ---------------------------------------------------------------------------
# Trait enhancement
# ---------------------------------------------------------------------------

MIN_ENHANCE_LENGTH = 50

_BENEFITS_RE = re.compile(r"benefits|advantages|improvements|results|outcomes", re.IGNORECASE)

# (content signal, English statistic, Spanish statistic), first match wins
_STATISTICS = [
    (re.compile(r"presentation|slide|deck", re.I),
     "65% improvement with well-designed visuals",
     "Un 65% de mejora con visuales bien diseñados"),
    (re.compile(r"facebook|instagram|twitter|linkedin|social media", re.I),
     "40% higher engagement with personalized content",
     "Un 40% más de engagement con contenido personalizado"),
    (re.compile(r"youtube|video|script|filming", re.I),
     "70% higher viewer retention with effective storytelling",
     "Un 70% más de retención de espectadores con narrativas efectivas"),
    (re.compile(r"blog|article|post", re.I),
     "60% longer reading time with valuable, well-structured content",
     "Un 60% más de tiempo de lectura con contenido valioso y bien estructurado"),
    (re.compile(r"email|newsletter|inbox", re.I),
     "40% improvement with effective email management systems",
     "Un 40% de mejora con sistemas efectivos de gestión de correo electrónico"),
]
_DEFAULT_STATISTIC = (
    "35% productivity improvement with optimized tools",
    "Un 35% de mejora en productividad con herramientas optimizadas",
)


def pick_statistic(content: str, language: str = "en") -> str:
    """Context statistic matching what the content is about."""
    for pattern, english, spanish in _STATISTICS:
        if pattern.search(content):
            return spanish if language == "es" else english
    english, spanish = _DEFAULT_STATISTIC
    return spanish if language == "es" else english


def insert_statistic(content: str, statistic: str) -> str:
    """Place the statistic after the first benefits paragraph, or mid-content.

    A benefits paragraph that is already the last one gets nothing.
    """
    sentence = f"Did you know that up to {statistic} of professionals struggle with effective implementation?"
    paragraphs = content.split("\n\n")

    if _BENEFITS_RE.search(content):
        index = next(i for i, p in enumerate(paragraphs) if _BENEFITS_RE.search(p))
        if index < len(paragraphs) - 1:
            paragraphs.insert(index + 1, sentence)
            return "\n\n".join(paragraphs)
        return content

    paragraphs.insert(len(paragraphs) // 2, sentence)
    return "\n\n".join(paragraphs)


def _max_phrases(intensity: float) -> int:
    if intensity == 1:
        return 2
    if intensity == 2:
        return 3
    return 4


def _phrase_positions(paragraph_count: int, phrase_count: int, rng: random.Random) -> list[int]:
    if paragraph_count <= 3:
        return list(range(min(phrase_count, paragraph_count)))

    positions = []
    if phrase_count >= 1:
        positions.append(0)
    if phrase_count >= 2:
        positions.append(paragraph_count // 2)
    if phrase_count >= 3:
        positions.append(paragraph_count - 1)
    while len(positions) < phrase_count:
        pos = rng.randrange(paragraph_count)
        if pos not in positions:
            positions.append(pos)
    return positions


def enhance_with_persona_traits(
    content: str,
    style: str = DEFAULT_STYLE,
    intensity: float = 1,
    language: str = "en",
    rng: random.Random | None = None,
) -> str:
    """Add a context statistic and signature phrases to generated content.

    Content under 50 characters comes back untouched. Unknown styles are
    treated as `professional`: the statistic is added but no phrases.
    """
    rng = rng or random.Random()
    if not style or style not in PHRASES:
        style = DEFAULT_STYLE

    if not content or len(content) < MIN_ENHANCE_LENGTH:
        return content

    enhanced = insert_statistic(content, pick_statistic(content, language))

    phrases = get_persona_phrases(style, language)
    if not phrases:
        return enhanced

    paragraphs = enhanced.split("\n\n")
    phrase_count = min(max(1, len(paragraphs) // 4), _max_phrases(intensity))

    rng.shuffle(phrases)
    selected = phrases[:phrase_count]

    # insert from the end so earlier indexes stay valid
    positions = sorted(_phrase_positions(len(paragraphs), phrase_count, rng), reverse=True)
    for i, position in enumerate(positions):
        if i < len(selected):
            paragraphs[position] = selected[i] + "\n\n" + paragraphs[position]

    return "\n\n".join(paragraphs)


# ---------------------------------------------------------------------------
# Prompt templates
# ---------------------------------------------------------------------------

def get_persona_template(style: str, language: str = "en") -> str:
    """Voice instructions for a persona, '' for professional or unknown styles."""
    if style == "ariastar":
        return ARIASTAR_TEMPLATE_ES if language == "es" else ARIASTAR_TEMPLATE_EN
    template = SHORT_TEMPLATES.get(style)
    if template is None:
        return ""
    text = TEMPLATE_TEXT["es" if language == "es" else "en"]
    return template.format(
        voice_must=text["voice_must"],
        every_part=text["every_part"],
        style=text["style"],
        year=datetime.now().year,
    )
