"""Interpretation one-liners for planet-pair aspects.

Keys follow the engine's discovery order: the first planet is always the one
earlier in Sun..Saturn, Rahu, Ketu, Mandi, Gulika.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

ASPECT_ONE_LINERS: Mapping[str, str] = MappingProxyType({
    "Conjunction": "Energy fusion: the two planets act as one and amplify each other.",
    "Opposition": "Awareness through polarity: balance two competing needs/forces.",
    "Trine": "Easy flow: natural talent and support with minimal resistance.",
    "Square": "Growth pressure: friction that pushes action, mastery, and change.",
    "Sextile": "Opportunity: helpful cooperation that activates with initiative.",
})

_PAIR_TEXTS: dict[str, dict[str, dict[str, str]]] = {
    "Sun": {
        "Moon": {
            "Conjunction": "Self and emotions merge: identity and feelings are unified.",
            "Opposition": "Head vs heart theme: conscious self opposes inner needs.",
            "Trine": "Confidence and feelings flow: self-expression supported by emotions.",
            "Square": "Ego vs emotional tension: identity conflicts with inner needs.",
            "Sextile": "Opportunity to align self and feelings: harmony through initiative.",
        },
        "Mars": {
            "Conjunction": "Will and action unite: strong drive and leadership energy.",
            "Opposition": "Ego vs action tension: self-direction conflicts with drive.",
            "Trine": "Confidence and action flow: natural leadership and courage.",
            "Square": "Ego vs action friction: willpower challenged by impulses.",
            "Sextile": "Opportunity to lead and act: constructive use of energy.",
        },
        "Mercury": {
            "Conjunction": "Mind and self merge: clear communication of identity.",
            "Opposition": "Mind vs self tension: thoughts oppose conscious direction.",
            "Trine": "Clear expression flows: easy communication of ideas.",
            "Square": "Mind vs self friction: communication challenges identity.",
            "Sextile": "Opportunity to express self: ideas support identity.",
        },
        "Jupiter": {
            "Conjunction": "Self and wisdom unite: confident expansion and growth.",
            "Opposition": "Self vs wisdom tension: identity opposes higher learning.",
            "Trine": "Confidence and growth flow: natural optimism and expansion.",
            "Square": "Self vs growth friction: identity challenged by beliefs.",
            "Sextile": "Opportunity for growth: wisdom supports self-development.",
        },
        "Venus": {
            "Conjunction": "Self and love merge: harmonious self-expression and attraction.",
            "Opposition": "Self vs love tension: identity opposes relationships.",
            "Trine": "Confidence and love flow: natural charm and harmony.",
            "Square": "Self vs love friction: identity challenged by relationships.",
            "Sextile": "Opportunity for love: relationships support self-expression.",
        },
        "Saturn": {
            "Conjunction": "Self and discipline unite: serious, structured identity.",
            "Opposition": "Self vs discipline tension: freedom opposes responsibility.",
            "Trine": "Confidence and structure flow: steady achievement.",
            "Square": "Self vs discipline friction: identity challenged by limits.",
            "Sextile": "Opportunity for structure: discipline supports goals.",
        },
        "Rahu": {
            "Conjunction": "Ego amplified by desire: intense ambition and worldly focus.",
            "Opposition": "Self vs obsession tension: identity opposes worldly desires.",
            "Trine": "Confidence and ambition flow: self-expression supports goals.",
            "Square": "Self vs desire friction: identity challenged by cravings.",
            "Sextile": "Opportunity for ambitious self: desires support identity.",
        },
        "Ketu": {
            "Conjunction": "Self meets detachment: spiritual identity, ego dissolution.",
            "Opposition": "Self vs detachment tension: identity opposes letting go.",
            "Trine": "Confidence and spirituality flow: self-expression supports moksha.",
            "Square": "Self vs detachment friction: identity challenged by withdrawal.",
            "Sextile": "Opportunity for spiritual self: detachment supports growth.",
        },
        "Mandi": {
            "Conjunction": "Self meets obstacles: identity shaped by karmic suffering.",
            "Opposition": "Self vs obstacles tension: identity opposes karmic delays.",
            "Trine": "Confidence through obstacles: self-expression overcomes karma.",
            "Square": "Self vs obstacles friction: identity challenged by suffering.",
            "Sextile": "Opportunity through karma: obstacles support self-growth.",
        },
        "Gulika": {
            "Conjunction": "Self meets poison: identity transformed through crisis.",
            "Opposition": "Self vs toxicity tension: identity opposes hidden dangers.",
            "Trine": "Confidence through transformation: self-expression supports change.",
            "Square": "Self vs poison friction: identity challenged by hidden forces.",
            "Sextile": "Opportunity for transformation: crisis supports self-growth.",
        },
    },
    "Moon": {
        "Mars": {
            "Conjunction": "Emotions and action merge: passionate, reactive energy.",
            "Opposition": "Feelings vs action tension: emotions oppose drive.",
            "Trine": "Emotions and action flow: natural courage and initiative.",
            "Square": "Feelings vs action friction: emotional conflicts with drive.",
            "Sextile": "Opportunity for emotional action: feelings motivate.",
        },
        "Mercury": {
            "Conjunction": "Feelings and thoughts merge: emotional communication.",
            "Opposition": "Feelings vs thoughts tension: heart opposes mind.",
            "Trine": "Emotional expression flows: easy communication of feelings.",
            "Square": "Feelings vs thoughts friction: emotional communication issues.",
            "Sextile": "Opportunity for emotional expression: thoughts support feelings.",
        },
        "Jupiter": {
            "Conjunction": "Emotions and wisdom merge: optimistic, expansive feelings.",
            "Opposition": "Feelings vs wisdom tension: emotions oppose beliefs.",
            "Trine": "Emotional growth flows: natural optimism and support.",
            "Square": "Feelings vs wisdom friction: emotions challenged by beliefs.",
            "Sextile": "Opportunity for emotional growth: wisdom supports feelings.",
        },
        "Venus": {
            "Conjunction": "Feelings and love merge: harmonious, romantic emotions.",
            "Opposition": "Feelings vs love tension: emotions oppose relationships.",
            "Trine": "Emotional harmony flows: natural affection and beauty.",
            "Square": "Feelings vs love friction: emotional relationship challenges.",
            "Sextile": "Opportunity for emotional love: relationships support feelings.",
        },
        "Saturn": {
            "Conjunction": "Feelings and discipline merge: serious, controlled emotions.",
            "Opposition": "Feelings vs discipline tension: emotions oppose responsibility.",
            "Trine": "Emotional stability flows: steady, reliable feelings.",
            "Square": "Feelings vs discipline friction: emotional control challenges.",
            "Sextile": "Opportunity for emotional maturity: structure supports feelings.",
        },
        "Rahu": {
            "Conjunction": "Emotions amplified: intense feelings, mental restlessness.",
            "Opposition": "Feelings vs obsession tension: emotions oppose worldly desires.",
            "Trine": "Emotions and ambition flow: feelings support material goals.",
            "Square": "Feelings vs desire friction: emotions challenged by cravings.",
            "Sextile": "Opportunity for emotional ambition: desires support feelings.",
        },
        "Ketu": {
            "Conjunction": "Emotions meet detachment: intuitive, psychic sensitivity.",
            "Opposition": "Feelings vs detachment tension: emotions oppose letting go.",
            "Trine": "Emotions and spirituality flow: feelings support inner growth.",
            "Square": "Feelings vs detachment friction: emotions challenged by withdrawal.",
            "Sextile": "Opportunity for emotional spirituality: detachment supports feelings.",
        },
        "Mandi": {
            "Conjunction": "Emotions meet obstacles: mental suffering, karmic emotional patterns.",
            "Opposition": "Feelings vs obstacles tension: emotions oppose karmic delays.",
            "Trine": "Emotions through obstacles: feelings overcome karma.",
            "Square": "Feelings vs obstacles friction: emotions challenged by suffering.",
            "Sextile": "Opportunity through karma: obstacles support emotional growth.",
        },
        "Gulika": {
            "Conjunction": "Emotions meet poison: intense mental transformation.",
            "Opposition": "Feelings vs toxicity tension: emotions oppose hidden dangers.",
            "Trine": "Emotions through transformation: feelings support deep change.",
            "Square": "Feelings vs poison friction: emotions challenged by hidden forces.",
            "Sextile": "Opportunity for emotional transformation: crisis supports feelings.",
        },
    },
    "Mars": {
        "Mercury": {
            "Conjunction": "Action and thoughts merge: decisive, sharp communication.",
            "Opposition": "Action vs thoughts tension: drive opposes ideas.",
            "Trine": "Action and thoughts flow: energetic communication and ideas.",
            "Square": "Action vs thoughts friction: communication challenges drive.",
            "Sextile": "Opportunity for action: ideas support initiative.",
        },
        "Jupiter": {
            "Conjunction": "Action and wisdom merge: confident, expansive drive.",
            "Opposition": "Action vs wisdom tension: drive opposes beliefs.",
            "Trine": "Action and growth flow: natural leadership and expansion.",
            "Square": "Action vs wisdom friction: drive challenged by beliefs.",
            "Sextile": "Opportunity for growth: wisdom supports action.",
        },
        "Venus": {
            "Conjunction": "Action and love merge: passionate, romantic energy.",
            "Opposition": "Action vs love tension: drive opposes relationships.",
            "Trine": "Action and harmony flow: natural charm and initiative.",
            "Square": "Action vs love friction: drive challenges relationships.",
            "Sextile": "Opportunity for harmonious action: relationships support drive.",
        },
        "Saturn": {
            "Conjunction": "Action and discipline merge: controlled, persistent effort.",
            "Opposition": "Action vs discipline tension: drive opposes responsibility.",
            "Trine": "Action and structure flow: steady achievement.",
            "Square": "Action vs discipline friction: drive challenged by limits.",
            "Sextile": "Opportunity for structured action: discipline supports drive.",
        },
        "Rahu": {
            "Conjunction": "Action amplified: intense drive, aggressive ambition.",
            "Opposition": "Action vs obsession tension: drive opposes worldly desires.",
            "Trine": "Action and ambition flow: drive supports material goals.",
            "Square": "Action vs desire friction: drive challenged by cravings.",
            "Sextile": "Opportunity for ambitious action: desires support drive.",
        },
        "Ketu": {
            "Conjunction": "Action meets detachment: spiritual warrior, past-life courage.",
            "Opposition": "Action vs detachment tension: drive opposes letting go.",
            "Trine": "Action and spirituality flow: drive supports inner growth.",
            "Square": "Action vs detachment friction: drive challenged by withdrawal.",
            "Sextile": "Opportunity for spiritual action: detachment supports drive.",
        },
        "Mandi": {
            "Conjunction": "Action meets obstacles: drive shaped by karmic suffering.",
            "Opposition": "Action vs obstacles tension: drive opposes karmic delays.",
            "Trine": "Action through obstacles: drive overcomes karma.",
            "Square": "Action vs obstacles friction: drive challenged by suffering.",
            "Sextile": "Opportunity through karma: obstacles support action.",
        },
        "Gulika": {
            "Conjunction": "Action meets poison: drive transformed through crisis.",
            "Opposition": "Action vs toxicity tension: drive opposes hidden dangers.",
            "Trine": "Action through transformation: drive supports deep change.",
            "Square": "Action vs poison friction: drive challenged by hidden forces.",
            "Sextile": "Opportunity for transformation: crisis supports action.",
        },
    },
    "Mercury": {
        "Jupiter": {
            "Conjunction": "Thoughts and wisdom merge: expansive, optimistic communication.",
            "Opposition": "Thoughts vs wisdom tension: ideas oppose beliefs.",
            "Trine": "Thoughts and growth flow: natural learning and expression.",
            "Square": "Thoughts vs wisdom friction: ideas challenged by beliefs.",
            "Sextile": "Opportunity for learning: wisdom supports ideas.",
        },
        "Venus": {
            "Conjunction": "Thoughts and love merge: charming, artistic communication.",
            "Opposition": "Thoughts vs love tension: ideas oppose relationships.",
            "Trine": "Thoughts and harmony flow: natural charm and expression.",
            "Square": "Thoughts vs love friction: communication challenges relationships.",
            "Sextile": "Opportunity for harmonious communication: relationships support ideas.",
        },
        "Saturn": {
            "Conjunction": "Thoughts and discipline merge: serious, structured thinking.",
            "Opposition": "Thoughts vs discipline tension: ideas oppose responsibility.",
            "Trine": "Thoughts and structure flow: clear, organized communication.",
            "Square": "Thoughts vs discipline friction: thinking challenged by limits.",
            "Sextile": "Opportunity for structured thinking: discipline supports ideas.",
        },
        "Rahu": {
            "Conjunction": "Intellect amplified: clever, unconventional thinking.",
            "Opposition": "Thoughts vs obsession tension: ideas oppose worldly desires.",
            "Trine": "Intellect and ambition flow: ideas support material goals.",
            "Square": "Thoughts vs desire friction: ideas challenged by cravings.",
            "Sextile": "Opportunity for ambitious thinking: desires support ideas.",
        },
        "Ketu": {
            "Conjunction": "Intellect meets detachment: intuitive, abstract thinking.",
            "Opposition": "Thoughts vs detachment tension: ideas oppose letting go.",
            "Trine": "Intellect and spirituality flow: ideas support inner growth.",
            "Square": "Thoughts vs detachment friction: ideas challenged by withdrawal.",
            "Sextile": "Opportunity for spiritual thinking: detachment supports ideas.",
        },
        "Mandi": {
            "Conjunction": "Intellect meets obstacles: thinking shaped by karmic patterns.",
            "Opposition": "Thoughts vs obstacles tension: ideas oppose karmic delays.",
            "Trine": "Intellect through obstacles: ideas overcome karma.",
            "Square": "Thoughts vs obstacles friction: ideas challenged by suffering.",
            "Sextile": "Opportunity through karma: obstacles support thinking.",
        },
        "Gulika": {
            "Conjunction": "Intellect meets poison: thinking transformed through crisis.",
            "Opposition": "Thoughts vs toxicity tension: ideas oppose hidden dangers.",
            "Trine": "Intellect through transformation: ideas support deep change.",
            "Square": "Thoughts vs poison friction: ideas challenged by hidden forces.",
            "Sextile": "Opportunity for transformation: crisis supports thinking.",
        },
    },
    "Jupiter": {
        "Venus": {
            "Conjunction": "Wisdom and love merge: expansive, harmonious relationships.",
            "Opposition": "Wisdom vs love tension: beliefs oppose relationships.",
            "Trine": "Wisdom and harmony flow: natural growth and affection.",
            "Square": "Wisdom vs love friction: beliefs challenge relationships.",
            "Sextile": "Opportunity for harmonious growth: relationships support expansion.",
        },
        "Saturn": {
            "Conjunction": "Wisdom and discipline merge: structured, responsible growth.",
            "Opposition": "Wisdom vs discipline tension: expansion opposes responsibility.",
            "Trine": "Wisdom and structure flow: steady achievement and growth.",
            "Square": "Wisdom vs discipline friction: growth challenged by limits.",
            "Sextile": "Opportunity for structured growth: discipline supports wisdom.",
        },
        "Rahu": {
            "Conjunction": "Wisdom amplified: expansive ambition, unconventional beliefs.",
            "Opposition": "Wisdom vs obsession tension: beliefs oppose worldly desires.",
            "Trine": "Wisdom and ambition flow: beliefs support material goals.",
            "Square": "Wisdom vs desire friction: beliefs challenged by cravings.",
            "Sextile": "Opportunity for ambitious wisdom: desires support beliefs.",
        },
        "Ketu": {
            "Conjunction": "Wisdom meets detachment: deep spiritual knowledge.",
            "Opposition": "Wisdom vs detachment tension: beliefs oppose letting go.",
            "Trine": "Wisdom and spirituality flow: beliefs support inner growth.",
            "Square": "Wisdom vs detachment friction: beliefs challenged by withdrawal.",
            "Sextile": "Opportunity for spiritual wisdom: detachment supports beliefs.",
        },
        "Mandi": {
            "Conjunction": "Wisdom meets obstacles: beliefs shaped by karmic suffering.",
            "Opposition": "Wisdom vs obstacles tension: beliefs oppose karmic delays.",
            "Trine": "Wisdom through obstacles: beliefs overcome karma.",
            "Square": "Wisdom vs obstacles friction: beliefs challenged by suffering.",
            "Sextile": "Opportunity through karma: obstacles support wisdom.",
        },
        "Gulika": {
            "Conjunction": "Wisdom meets poison: beliefs transformed through crisis.",
            "Opposition": "Wisdom vs toxicity tension: beliefs oppose hidden dangers.",
            "Trine": "Wisdom through transformation: beliefs support deep change.",
            "Square": "Wisdom vs poison friction: beliefs challenged by hidden forces.",
            "Sextile": "Opportunity for transformation: crisis supports wisdom.",
        },
    },
    "Venus": {
        "Saturn": {
            "Conjunction": "Love and discipline merge: serious, committed relationships.",
            "Opposition": "Love vs discipline tension: relationships oppose responsibility.",
            "Trine": "Love and structure flow: steady, harmonious commitments.",
            "Square": "Love vs discipline friction: relationships challenged by limits.",
            "Sextile": "Opportunity for committed love: structure supports relationships.",
        },
        "Rahu": {
            "Conjunction": "Love amplified by desire: intense, unconventional attractions.",
            "Opposition": "Love vs obsession tension: relationships oppose worldly desires.",
            "Trine": "Love and ambition flow: relationships support material growth.",
            "Square": "Love vs desire friction: relationships challenged by cravings.",
            "Sextile": "Opportunity for passionate love: desires support relationships.",
        },
        "Ketu": {
            "Conjunction": "Love meets detachment: spiritual or past-life romantic connections.",
            "Opposition": "Love vs detachment tension: relationships oppose spiritual growth.",
            "Trine": "Love and spirituality flow: relationships support inner growth.",
            "Square": "Love vs detachment friction: relationships challenged by withdrawal.",
            "Sextile": "Opportunity for spiritual love: detachment brings clarity.",
        },
        "Mandi": {
            "Conjunction": "Love meets obstacles: relationships shaped by karmic suffering.",
            "Opposition": "Love vs obstacles tension: relationships oppose karmic delays.",
            "Trine": "Love through obstacles: relationships overcome karma.",
            "Square": "Love vs obstacles friction: relationships challenged by suffering.",
            "Sextile": "Opportunity through karma: obstacles support love.",
        },
        "Gulika": {
            "Conjunction": "Love meets poison: relationships transformed through crisis.",
            "Opposition": "Love vs toxicity tension: relationships oppose hidden dangers.",
            "Trine": "Love through transformation: relationships support deep change.",
            "Square": "Love vs poison friction: relationships challenged by hidden forces.",
            "Sextile": "Opportunity for transformation: crisis supports love.",
        },
    },
    "Saturn": {
        "Rahu": {
            "Conjunction": "Discipline amplified: intense focus on structure and ambition.",
            "Opposition": "Discipline vs obsession tension: responsibility opposes desires.",
            "Trine": "Structure and ambition flow: disciplined pursuit of goals.",
            "Square": "Discipline vs desire friction: limits challenged by cravings.",
            "Sextile": "Opportunity for focused ambition: discipline supports desires.",
        },
        "Ketu": {
            "Conjunction": "Discipline meets spirituality: structured spiritual practice.",
            "Opposition": "Discipline vs detachment tension: responsibility opposes letting go.",
            "Trine": "Structure and spirituality flow: disciplined inner growth.",
            "Square": "Discipline vs detachment friction: limits challenged by withdrawal.",
            "Sextile": "Opportunity for spiritual discipline: structure supports moksha.",
        },
        "Mandi": {
            "Conjunction": "Double Saturn energy: intense karmic lessons and delays.",
            "Opposition": "Discipline vs obstacles tension: responsibility opposes suffering.",
            "Trine": "Structure and karma flow: disciplined handling of obstacles.",
            "Square": "Discipline vs obstacles friction: limits compounded by karma.",
            "Sextile": "Opportunity to overcome: discipline supports karmic resolution.",
        },
        "Gulika": {
            "Conjunction": "Discipline meets poison: intense transformation through limits.",
            "Opposition": "Discipline vs toxicity tension: responsibility opposes hidden dangers.",
            "Trine": "Structure and transformation flow: disciplined handling of crises.",
            "Square": "Discipline vs poison friction: limits challenged by hidden forces.",
            "Sextile": "Opportunity for transformation: discipline supports purification.",
        },
    },
    "Rahu": {
        "Ketu": {
            "Conjunction": "Impossible aspect: nodes are always opposite each other.",
            "Opposition": "Karmic axis activated: past vs future, letting go vs pursuing.",
            "Trine": "Desire and detachment flow: balanced karmic growth.",
            "Square": "Desire vs detachment friction: worldly vs spiritual conflict.",
            "Sextile": "Opportunity for karmic balance: desires support spiritual growth.",
        },
        "Mandi": {
            "Conjunction": "Obsession meets obstacles: amplified karmic suffering.",
            "Opposition": "Desire vs obstacles tension: ambitions opposed by karma.",
            "Trine": "Desire and karma flow: obstacles fuel ambition.",
            "Square": "Desire vs obstacles friction: cravings challenged by suffering.",
            "Sextile": "Opportunity through obstacles: karma supports growth.",
        },
        "Gulika": {
            "Conjunction": "Obsession meets poison: intense, potentially dangerous desires.",
            "Opposition": "Desire vs toxicity tension: ambitions opposed by hidden dangers.",
            "Trine": "Desire and transformation flow: ambitions support deep change.",
            "Square": "Desire vs poison friction: cravings challenged by hidden forces.",
            "Sextile": "Opportunity for transformation: desires support purification.",
        },
    },
    "Ketu": {
        "Mandi": {
            "Conjunction": "Detachment meets obstacles: spiritual lessons through suffering.",
            "Opposition": "Detachment vs obstacles tension: letting go opposed by karma.",
            "Trine": "Detachment and karma flow: spiritual growth through obstacles.",
            "Square": "Detachment vs obstacles friction: spirituality challenged by suffering.",
            "Sextile": "Opportunity for karmic release: detachment supports resolution.",
        },
        "Gulika": {
            "Conjunction": "Detachment meets poison: spiritual transformation through crisis.",
            "Opposition": "Detachment vs toxicity tension: spirituality opposed by hidden dangers.",
            "Trine": "Detachment and transformation flow: letting go supports deep change.",
            "Square": "Detachment vs poison friction: spirituality challenged by hidden forces.",
            "Sextile": "Opportunity for spiritual purification: detachment supports healing.",
        },
    },
    "Mandi": {
        "Gulika": {
            "Conjunction": "Double malefic: intense karmic suffering and transformation.",
            "Opposition": "Obstacles vs poison tension: karma opposed by hidden dangers.",
            "Trine": "Obstacles and transformation flow: suffering leads to growth.",
            "Square": "Obstacles vs poison friction: karma compounded by hidden forces.",
            "Sextile": "Opportunity through crisis: obstacles support transformation.",
        },
    },
}

# Flattened (first, second, aspect type) -> text.
PAIR_ONE_LINERS: Mapping[tuple[str, str, str], str] = MappingProxyType({
    (first, second, aspect_type): text
    for first, partners in _PAIR_TEXTS.items()
    for second, by_type in partners.items()
    for aspect_type, text in by_type.items()
})
