"""
Big Five — descriptive content tables.

Pure data: per-band descriptions and per-pole detail blocks for every
trait and aspect, plus the short phrases used by the summary narrative.
Band keys are ``PercentileBand`` values; pole keys are ``"low"`` and
``"high"``.  The banding logic lives in ``descriptions_service``.
"""

from __future__ import annotations

from typing import Any

from big5_scoring.schemas.questionnaire import Aspect, Trait

# ──────────────────────────────────────────────────────────────────────────────
# Aspects
# ──────────────────────────────────────────────────────────────────────────────

ASPECT_CONTENT: dict[Aspect, dict[str, Any]] = {
    Aspect.COMPASSION: {
        "descriptions": {
            "exceptionally_low": "You are exceptionally low in compassion. Other people's hardships rarely move you, and your own interests almost always come first.",
            "very_low": "You are very low in compassion. You seldom go out of your way for others and are unwilling to trade your comfort for theirs.",
            "low": "You are low in compassion. You look after your own needs first and are not easily swayed by other people's troubles.",
            "moderately_low": "You are moderately low in compassion. You can feel for others, but your own priorities usually win out.",
            "typical": "You are average in compassion. You empathise with others while keeping sensible limits on how much you give.",
            "moderately_high": "You are moderately high in compassion. You care about how others are doing and often lend a hand.",
            "high": "You are high in compassion. You feel other people's pain keenly and frequently put their needs ahead of yours.",
            "very_high": "You are very high in compassion. Suffering around you affects you deeply and you go to real lengths to ease it.",
            "exceptionally_high": "You are exceptionally high in compassion. Your empathy is so strong that you can neglect yourself while caring for others.",
        },
        "low": {
            "characteristics": ["Puts own interests first", "Rarely moved by others' distress", "Practical rather than sentimental", "Keeps emotional distance"],
            "advantages": ["Clear personal boundaries", "Objective judgement", "Hard to exploit", "Comfortable advocating for self"],
            "challenges": ["Can come across as cold", "Slow to build emotional closeness", "May overlook what others need"],
            "relationship_style": "You show care through practical help more than emotional comfort, and you are direct about what you need.",
            "career_implications": "You do well where detachment helps: negotiation, auditing, triage and other roles that require hard calls.",
        },
        "high": {
            "characteristics": ["Strongly empathetic", "Attentive to others' wellbeing", "Generous with time and help", "Emotionally responsive"],
            "advantages": ["Builds deep bonds", "Natural caregiver", "Creates supportive spaces", "Trusted confidant"],
            "challenges": ["Neglects own needs", "Open to being taken advantage of", "Absorbs others' stress", "Avoids necessary confrontation"],
            "relationship_style": "You tune in closely to your partner's feelings and will make real sacrifices for their happiness.",
            "career_implications": "You thrive in caring work such as healthcare, counselling, teaching and community roles.",
        },
    },
    Aspect.POLITENESS: {
        "descriptions": {
            "exceptionally_low": "You are exceptionally low in politeness. You challenge authority readily and are at ease with open confrontation.",
            "very_low": "You are very low in politeness. You are not deferential and push back hard when pushed.",
            "low": "You are low in politeness. You speak your mind and question people regardless of their rank.",
            "moderately_low": "You are moderately low in politeness. You can be courteous but will challenge others when you think it matters.",
            "typical": "You are average in politeness. You show respect where it is due and stand your ground when needed.",
            "moderately_high": "You are moderately high in politeness. You tend to be courteous and prefer tact to confrontation.",
            "high": "You are high in politeness. You respect rules and hierarchy and avoid conflict where you can.",
            "very_high": "You are very high in politeness. You are markedly deferential and may sidestep confrontations that need to happen.",
            "exceptionally_high": "You are exceptionally high in politeness. You defer so strongly that asserting yourself can feel almost impossible.",
        },
        "low": {
            "characteristics": ["Questions authority", "Comfortable with conflict", "Blunt communicator", "Sceptical of hierarchy"],
            "advantages": ["Willing to name problems", "Drives change", "Authentic and direct", "Leads from conviction"],
            "challenges": ["Starts avoidable conflicts", "Friction in hierarchical settings", "Can seem disrespectful"],
            "relationship_style": "You value honesty over smoothness and will raise difficult topics even when it causes short-term friction.",
            "career_implications": "You suit entrepreneurial, advocacy or leadership roles that reward challenging the status quo.",
        },
        "high": {
            "characteristics": ["Courteous and respectful", "Follows rules", "Diplomatic", "Avoids unnecessary conflict"],
            "advantages": ["Reliable team member", "Keeps the peace", "Respectful relationships", "Works well within process"],
            "challenges": ["Avoids needed confrontation", "Can be taken advantage of", "Suppresses own needs", "Reluctant to take the lead"],
            "relationship_style": "You prioritise harmony and respect, often deferring to your partner to keep the peace.",
            "career_implications": "You suit structured organisations, client-facing roles and positions that call for diplomacy.",
        },
    },
    Aspect.INDUSTRIOUSNESS: {
        "descriptions": {
            "exceptionally_low": "You are exceptionally low in industriousness. Leisure comes well before work and long-term goals are hard to sustain.",
            "very_low": "You are very low in industriousness. You procrastinate often and frequently leave tasks unfinished.",
            "low": "You are low in industriousness. Fun and people usually matter more to you than achievement.",
            "moderately_low": "You are moderately low in industriousness. You can push hard when motivated but happily put things off.",
            "typical": "You are average in industriousness. You work hard when it counts and still protect your downtime.",
            "moderately_high": "You are moderately high in industriousness. You are usually driven to get things done while keeping some balance.",
            "high": "You are high in industriousness. You are strongly motivated to achieve and often put work before leisure.",
            "very_high": "You are very high in industriousness. Your drive is exceptional, sometimes at the cost of rest.",
            "exceptionally_high": "You are exceptionally high in industriousness. Your work ethic is extraordinary and can tip into workaholism.",
        },
        "low": {
            "characteristics": ["Prioritises leisure", "Prone to procrastination", "Lives in the moment", "Relaxed about deadlines"],
            "advantages": ["Good at switching off", "Flexible", "Values experiences and people", "Low stress about work"],
            "challenges": ["Struggles with long-term goals", "Misses deadlines", "May underachieve", "Leaves tasks half done"],
            "relationship_style": "You put quality time with loved ones ahead of career ambitions and are easy to relax with.",
            "career_implications": "You fit flexible, creative settings without rigid deadlines or heavy long-range planning.",
        },
        "high": {
            "characteristics": ["Strong work ethic", "Goal-oriented", "Persistent", "Achievement-focused"],
            "advantages": ["High achievement", "Finishes what they start", "Dependable", "Resilient under workload"],
            "challenges": ["Burnout risk", "Work crowds out relationships", "Hard on self", "Finds rest difficult"],
            "relationship_style": "You bring commitment to relationships but may need to guard time together from work.",
            "career_implications": "You excel in demanding careers that reward persistence and sustained effort toward hard goals.",
        },
    },
    Aspect.ORDERLINESS: {
        "descriptions": {
            "exceptionally_low": "You are exceptionally low in orderliness. Chaos does not bother you and you almost never use schedules or systems.",
            "very_low": "You are very low in orderliness. Mess goes unnoticed and you take things as they come rather than planning.",
            "low": "You are low in orderliness. You prefer flexibility to structure and disorder rarely troubles you.",
            "moderately_low": "You are moderately low in orderliness. You tolerate some mess and favour loose organisation.",
            "typical": "You are average in orderliness. You like some routine but cope when plans are disrupted.",
            "moderately_high": "You are moderately high in orderliness. You prefer tidy surroundings and steady routines while staying adaptable.",
            "high": "You are high in orderliness. You like clean spaces, clear schedules and things done properly.",
            "very_high": "You are very high in orderliness. You need structure and feel uneasy amid mess or disorder.",
            "exceptionally_high": "You are exceptionally high in orderliness. Your need for order is so strong it can become rigid.",
        },
        "low": {
            "characteristics": ["Comfortable with mess", "Spontaneous", "Dislikes routine", "Improvises"],
            "advantages": ["Highly adaptable", "Unfazed by disruption", "Creative flexibility", "Goes with the flow"],
            "challenges": ["Struggles with detail work", "Loses track of things", "Seen as disorganised", "Resists systems"],
            "relationship_style": "You are easygoing about household routines and happy to change plans on short notice.",
            "career_implications": "You suit dynamic, fast-changing environments that reward improvisation.",
        },
        "high": {
            "characteristics": ["Organised", "Values cleanliness", "Keeps schedules", "Prefers predictability"],
            "advantages": ["Efficient", "Strong planner", "Attention to detail", "Builds reliable systems"],
            "challenges": ["Can be inflexible", "Stressed by disorder", "Critical of mess", "Slow to adapt"],
            "relationship_style": "You like predictable shared routines and may feel unsettled when a partner disrupts them.",
            "career_implications": "You suit structured roles that value procedure, precision and careful planning.",
        },
    },
    Aspect.ENTHUSIASM: {
        "descriptions": {
            "exceptionally_low": "You are exceptionally low in enthusiasm. You rarely feel surges of excitement and keep a calm, even emotional tone.",
            "very_low": "You are very low in enthusiasm. Positive emotions come to you less often and less intensely than to most people.",
            "low": "You are low in enthusiasm. You are emotionally reserved and slow to warm up to new people.",
            "moderately_low": "You are moderately low in enthusiasm. You enjoy yourself but in a quieter, more understated way.",
            "typical": "You are average in enthusiasm. You feel a normal range of positive emotion and can be lively when the moment calls for it.",
            "moderately_high": "You are moderately high in enthusiasm. You often feel upbeat and bring energy to social settings.",
            "high": "You are high in enthusiasm. You feel joy intensely, make friends easily and lift the mood around you.",
            "very_high": "You are very high in enthusiasm. Your warmth and excitement strongly shape how you connect with people.",
            "exceptionally_high": "You are exceptionally high in enthusiasm. Your energy is so abundant it can overwhelm quieter people.",
        },
        "low": {
            "characteristics": ["Emotionally steady", "Reserved", "Slow to warm up", "Understated expression"],
            "advantages": ["Calm presence", "Thoughtful decisions", "Steady in a crisis", "Not swept up by hype"],
            "challenges": ["Can seem distant", "Hard to get to know", "Less energising to others", "May miss social opportunities"],
            "relationship_style": "You offer calm and stability, though a partner may sometimes want more visible excitement from you.",
            "career_implications": "You suit roles that need steady focus and careful analysis rather than constant social energy.",
        },
        "high": {
            "characteristics": ["Warm and outgoing", "Expressive", "Optimistic", "Laughs easily"],
            "advantages": ["Motivates others", "Makes friends quickly", "Positive atmosphere", "Resilient optimism"],
            "challenges": ["Can overwhelm others", "Impulsive when excited", "Energy can crash", "Easily disappointed"],
            "relationship_style": "You bring warmth and fun to relationships and make shared experiences feel exciting.",
            "career_implications": "You shine in people-facing roles such as sales, events, hospitality and team building.",
        },
    },
    Aspect.ASSERTIVENESS: {
        "descriptions": {
            "exceptionally_low": "You are exceptionally low in assertiveness. You very rarely take charge and strongly prefer to follow.",
            "very_low": "You are very low in assertiveness. You stay in the background and seldom take the lead.",
            "low": "You are low in assertiveness. You are quiet in groups and rarely push your views.",
            "moderately_low": "You are moderately low in assertiveness. You will speak up when needed but usually let others lead.",
            "typical": "You are average in assertiveness. You can take charge or follow depending on the situation.",
            "moderately_high": "You are moderately high in assertiveness. You often speak up and take the lead.",
            "high": "You are high in assertiveness. You readily take charge and are comfortable being the centre of attention.",
            "very_high": "You are very high in assertiveness. You lead strongly and often dominate group decisions.",
            "exceptionally_high": "You are exceptionally high in assertiveness. Your drive to lead is so strong that others may feel overruled.",
        },
        "low": {
            "characteristics": ["Prefers to follow", "Quiet in groups", "Avoids the spotlight", "Holds back opinions"],
            "advantages": ["Good listener", "Supportive teammate", "Creates room for others", "Low ego in groups"],
            "challenges": ["Needs go unspoken", "Ideas go unheard", "Overlooked for leadership", "Uncomfortable in conflict"],
            "relationship_style": "You are accommodating and supportive, and may need to practise voicing your own wishes.",
            "career_implications": "You suit specialist or supporting roles where careful execution matters more than persuasion.",
        },
        "high": {
            "characteristics": ["Takes charge", "Persuasive", "Speaks up confidently", "Influential"],
            "advantages": ["Natural leader", "Gets things moving", "Confident under scrutiny", "Persuades others"],
            "challenges": ["Dominates conversations", "Can seem pushy", "Listens too little", "Provokes conflict"],
            "relationship_style": "You tend to lead in relationships and do well to leave room for your partner to steer too.",
            "career_implications": "You suit management, sales, law and other roles that reward influence and decisiveness.",
        },
    },
    Aspect.WITHDRAWAL: {
        "descriptions": {
            "exceptionally_low": "You are exceptionally low in withdrawal. Stress and setbacks almost never make you retreat.",
            "very_low": "You are very low in withdrawal. You stay engaged and confident even when things go wrong.",
            "low": "You are low in withdrawal. Worry and self-doubt seldom hold you back.",
            "moderately_low": "You are moderately low in withdrawal. You usually stay engaged, pulling back only when truly overwhelmed.",
            "typical": "You are average in withdrawal. You sometimes retreat under stress but generally stay involved.",
            "moderately_high": "You are moderately high in withdrawal. Worry and discouragement lead you to pull back more than most.",
            "high": "You are high in withdrawal. You often feel anxious or discouraged and retreat from pressure.",
            "very_high": "You are very high in withdrawal. Stress, criticism and uncertainty strongly push you to withdraw.",
            "exceptionally_high": "You are exceptionally high in withdrawal. Anxiety and low mood can lead you to isolate yourself.",
        },
        "low": {
            "characteristics": ["Engaged under stress", "Self-assured", "Rarely discouraged", "Faces problems directly"],
            "advantages": ["Resilient", "Steady in adversity", "Keeps relationships going under strain", "Calm in a crisis"],
            "challenges": ["Misses signs of needing rest", "Pushes through issues that need attention", "May not process feelings fully"],
            "relationship_style": "You stay present with your partner through hard times, though you may need to learn when space is healthy.",
            "career_implications": "You suit high-pressure roles that demand sustained engagement and composure.",
        },
        "high": {
            "characteristics": ["Prone to worry", "Self-doubting", "Retreats under stress", "Sensitive to criticism"],
            "advantages": ["Alert to risks", "Careful decision-making", "Protective self-care instincts", "Takes time to process"],
            "challenges": ["Misses opportunities", "Can become isolated", "Avoids difficult conversations", "Low mood can linger"],
            "relationship_style": "You may withdraw from your partner under stress, so talking openly about needing space helps.",
            "career_implications": "You do best in predictable settings where you control your workload and exposure to pressure.",
        },
    },
    Aspect.VOLATILITY: {
        "descriptions": {
            "exceptionally_low": "You are exceptionally low in volatility. Your moods are remarkably steady and you are very hard to provoke.",
            "very_low": "You are very low in volatility. You stay composed and your temper rarely flares.",
            "low": "You are low in volatility. You keep your emotions under control and are not easily irritated.",
            "moderately_low": "You are moderately low in volatility. Your moods are mostly stable with occasional swings.",
            "typical": "You are average in volatility. You feel ordinary ups and downs and get irritated now and then.",
            "moderately_high": "You are moderately high in volatility. Your moods shift more than most and you can be quick to anger.",
            "high": "You are high in volatility. You get upset easily and your feelings can change quickly.",
            "very_high": "You are very high in volatility. Strong, fast-changing emotions are hard for you to regulate.",
            "exceptionally_high": "You are exceptionally high in volatility. Intense mood swings can disrupt your day-to-day life.",
        },
        "low": {
            "characteristics": ["Even-tempered", "Composed", "Predictable reactions", "Slow to anger"],
            "advantages": ["Strong emotional control", "Reliable", "Steady in emergencies", "Calming influence"],
            "challenges": ["Can seem unemotional", "May miss emotional cues", "Under-reacts to real problems"],
            "relationship_style": "You bring steadiness to relationships, though a partner may wish for more emotional expression.",
            "career_implications": "You suit roles that require composure, consistency and calm decisions under pressure.",
        },
        "high": {
            "characteristics": ["Emotionally intense", "Quick to anger", "Changeable moods", "Reactive"],
            "advantages": ["Passionate", "Emotionally honest", "Responsive to surroundings", "Expressive"],
            "challenges": ["Hard to self-regulate", "Can overwhelm others", "Inconsistent under stress", "Conflict from mood swings"],
            "relationship_style": "You bring intensity and passion, and do best with a partner who can ride out emotional swings.",
            "career_implications": "You fit expressive or creative work and may find roles demanding constant composure draining.",
        },
    },
    Aspect.INTELLECT: {
        "descriptions": {
            "exceptionally_low": "You are exceptionally low in intellect. Abstract ideas and theory hold almost no appeal for you.",
            "very_low": "You are very low in intellect. You prefer concrete, practical thinking and steer clear of complex theory.",
            "low": "You are low in intellect. You favour straightforward approaches over abstract reasoning.",
            "moderately_low": "You are moderately low in intellect. You can handle complexity but prefer practical methods.",
            "typical": "You are average in intellect. You move comfortably between practical and abstract thinking.",
            "moderately_high": "You are moderately high in intellect. You enjoy working through complex ideas while staying grounded.",
            "high": "You are high in intellect. You seek out hard problems and take pleasure in abstract thought.",
            "very_high": "You are very high in intellect. You have a deep love of learning and thrive on intellectual challenge.",
            "exceptionally_high": "You are exceptionally high in intellect. Your appetite for ideas and complexity sets you apart.",
        },
        "low": {
            "characteristics": ["Concrete thinker", "Prefers simple solutions", "Avoids theory", "Focused on the here and now"],
            "advantages": ["Practical problem-solving", "Clear communication", "Quick decisions", "Common sense"],
            "challenges": ["Misses novel solutions", "Avoids complex material", "May undervalue learning"],
            "relationship_style": "You prefer plain, practical conversation to long philosophical debates.",
            "career_implications": "You suit hands-on roles with concrete problems and visible results.",
        },
        "high": {
            "characteristics": ["Intellectually curious", "Quick learner", "Enjoys abstract ideas", "Rich vocabulary"],
            "advantages": ["Strong analytical skills", "Learns fast", "Handles complexity", "Articulate"],
            "challenges": ["Overthinks simple problems", "Lost in abstraction", "Impatient with slower pace"],
            "relationship_style": "You enjoy stimulating conversation and value a partner who engages with ideas.",
            "career_implications": "You thrive in analytical work: research, strategy, engineering and other idea-driven fields.",
        },
    },
    Aspect.AESTHETICS: {
        "descriptions": {
            "exceptionally_low": "You are exceptionally low in aesthetics. Art and beauty hold little interest and function always beats form.",
            "very_low": "You are very low in aesthetics. You rarely notice artistic detail and prefer purely practical surroundings.",
            "low": "You are low in aesthetics. Usefulness matters more to you than beauty or creative expression.",
            "moderately_low": "You are moderately low in aesthetics. You can enjoy beautiful things but put function first.",
            "typical": "You are average in aesthetics. You appreciate art and beauty without letting them drive your choices.",
            "moderately_high": "You are moderately high in aesthetics. You seek out music, art and nature and enjoy creative expression.",
            "high": "You are high in aesthetics. Beauty moves you and you care about the look and feel of your surroundings.",
            "very_high": "You are very high in aesthetics. Art and beauty play a central role in how you experience life.",
            "exceptionally_high": "You are exceptionally high in aesthetics. Your sensitivity to beauty deeply shapes how you see the world.",
        },
        "low": {
            "characteristics": ["Function over form", "Little interest in art", "Practical tastes", "Focused on utility"],
            "advantages": ["Practical choices", "Cost-conscious", "Efficient with resources", "Unfussy"],
            "challenges": ["Overlooks aesthetic value", "Limited creative outlet", "Undervalues design"],
            "relationship_style": "You focus on the practical side of shared life and pay less attention to romantic gestures or decor.",
            "career_implications": "You suit utility-focused work where efficiency matters more than appearance.",
        },
        "high": {
            "characteristics": ["Sensitive to beauty", "Loves music and art", "Reflective", "Needs a creative outlet"],
            "advantages": ["Rich inner life", "Creative perspective", "Eye for design", "Finds meaning in experience"],
            "challenges": ["Form over function", "Particular about surroundings", "Spends on aesthetics"],
            "relationship_style": "You value beauty and shared creative experiences, and enjoy adding artistry to life together.",
            "career_implications": "You thrive in creative and design-led work where taste and artistic judgement count.",
        },
    },
}

# ──────────────────────────────────────────────────────────────────────────────
# Traits
# ──────────────────────────────────────────────────────────────────────────────

TRAIT_CONTENT: dict[Trait, dict[str, Any]] = {
    Trait.OPENNESS: {
        "descriptions": {
            "exceptionally_low": "You are exceptionally low in openness. You strongly favour the familiar, the traditional and the practical.",
            "very_low": "You are very low in openness. You prefer tried-and-true methods and have little taste for abstraction or art.",
            "low": "You are low in openness. You are practical and conventional and like concrete over abstract.",
            "moderately_low": "You are moderately low in openness. New ideas interest you now and then, but convention usually wins.",
            "typical": "You are average in openness. You balance tradition with curiosity about new ideas and experiences.",
            "moderately_high": "You are moderately high in openness. You enjoy new ideas and creative pursuits while valuing some tradition.",
            "high": "You are high in openness. You seek out novelty, abstract thinking and creative experience.",
            "very_high": "You are very high in openness. You are highly imaginative and constantly looking for new perspectives.",
            "exceptionally_high": "You are exceptionally high in openness. Your hunger for novelty and ideas leads you toward the unconventional.",
        },
        "low": {
            "characteristics": ["Traditional", "Practical", "Prefers routine", "Concrete thinker"],
            "advantages": ["Grounded", "Consistent", "Values proven methods", "Clear priorities"],
            "challenges": ["Resists change", "Misses creative options", "Uneasy with ambiguity"],
            "relationship_style": "You value shared routines and familiar traditions with a partner.",
            "career_implications": "You suit established fields with clear methods and tangible outcomes.",
        },
        "high": {
            "characteristics": ["Curious", "Imaginative", "Open to new experiences", "Appreciates art and ideas"],
            "advantages": ["Creative problem-solving", "Adapts to new situations", "Broad interests", "Original thinking"],
            "challenges": ["Bored by routine", "Impractical at times", "Scattered interests"],
            "relationship_style": "You want a partner who shares your curiosity and is up for new experiences.",
            "career_implications": "You suit creative, research and innovation roles that reward fresh thinking.",
        },
    },
    Trait.AGREEABLENESS: {
        "descriptions": {
            "exceptionally_low": "You are exceptionally low in agreeableness. You are highly competitive, sceptical and blunt.",
            "very_low": "You are very low in agreeableness. You put your own goals ahead of harmony and value honesty over tact.",
            "low": "You are low in agreeableness. You are fairly competitive and prefer directness to diplomacy.",
            "moderately_low": "You are moderately low in agreeableness. You weigh others' interests but tend to be direct.",
            "typical": "You are average in agreeableness. You balance cooperation with standing up for yourself.",
            "moderately_high": "You are moderately high in agreeableness. You are cooperative and considerate but can assert yourself.",
            "high": "You are high in agreeableness. You are trusting, warm and keen to keep the peace.",
            "very_high": "You are very high in agreeableness. You are deeply cooperative and place great weight on harmony.",
            "exceptionally_high": "You are exceptionally high in agreeableness. Your warmth and cooperativeness can extend to self-sacrifice.",
        },
        "low": {
            "characteristics": ["Competitive", "Sceptical", "Direct", "Self-advocating"],
            "advantages": ["Tough negotiator", "Hard to manipulate", "Honest feedback", "Clear boundaries"],
            "challenges": ["Frequent friction", "Seen as harsh", "Slow to trust"],
            "relationship_style": "You are straightforward with partners and prefer honest disagreement to polite avoidance.",
            "career_implications": "You suit competitive settings such as negotiation, law, sales or critical review.",
        },
        "high": {
            "characteristics": ["Cooperative", "Trusting", "Kind", "Conflict-averse"],
            "advantages": ["Builds strong relationships", "Great collaborator", "Creates harmony", "Easy to approach"],
            "challenges": ["Struggles to say no", "Can be exploited", "Avoids needed conflict"],
            "relationship_style": "You are a warm, accommodating partner who works hard to keep the relationship harmonious.",
            "career_implications": "You suit collaborative, service and caring roles where goodwill matters.",
        },
    },
    Trait.CONSCIENTIOUSNESS: {
        "descriptions": {
            "exceptionally_low": "You are exceptionally low in conscientiousness. You live in the moment and rarely follow plans or schedules.",
            "very_low": "You are very low in conscientiousness. You are spontaneous and care little for structure or long-range planning.",
            "low": "You are low in conscientiousness. You prefer flexibility and spontaneity to plans and rules.",
            "moderately_low": "You are moderately low in conscientiousness. You keep some order but lean toward a looser approach.",
            "typical": "You are average in conscientiousness. You balance organisation and flexibility as the situation requires.",
            "moderately_high": "You are moderately high in conscientiousness. You are organised and goal-directed with some flexibility.",
            "high": "You are high in conscientiousness. You are disciplined, organised and steady in pursuit of goals.",
            "very_high": "You are very high in conscientiousness. Your self-discipline and organisation are exceptional.",
            "exceptionally_high": "You are exceptionally high in conscientiousness. Your discipline is extraordinary and can become rigid.",
        },
        "low": {
            "characteristics": ["Spontaneous", "Flexible", "Casual about plans", "Lives in the moment"],
            "advantages": ["Adaptable", "Relaxed", "Open to last-minute change", "Fun to be around"],
            "challenges": ["Unreliable with deadlines", "Disorganised", "Struggles with long-term goals"],
            "relationship_style": "You bring spontaneity to relationships but may need to work at follow-through.",
            "career_implications": "You suit fast-moving, flexible roles over tightly scheduled ones.",
        },
        "high": {
            "characteristics": ["Disciplined", "Organised", "Reliable", "Goal-driven"],
            "advantages": ["Achieves goals", "Dependable", "Plans well", "Strong follow-through"],
            "challenges": ["Perfectionism", "Inflexible", "Overworks"],
            "relationship_style": "You are a dependable partner who keeps commitments and plans for the future.",
            "career_implications": "You suit roles that reward reliability, planning and sustained effort.",
        },
    },
    Trait.EXTRAVERSION: {
        "descriptions": {
            "exceptionally_low": "You are exceptionally low in extraversion. You strongly prefer solitude and find socialising draining.",
            "very_low": "You are very low in extraversion. You are clearly introverted and prefer small groups and quiet places.",
            "low": "You are low in extraversion. You enjoy solitude and small gatherings more than big crowds.",
            "moderately_low": "You are moderately low in extraversion. You like company but often choose quieter settings.",
            "typical": "You are average in extraversion. You are at ease both with people and on your own.",
            "moderately_high": "You are moderately high in extraversion. You enjoy social activity and still value some alone time.",
            "high": "You are high in extraversion. You are sociable, energetic and recharge by being around others.",
            "very_high": "You are very high in extraversion. You thrive on social contact and group energy.",
            "exceptionally_high": "You are exceptionally high in extraversion. Your social drive is so strong that solitude feels uncomfortable.",
        },
        "low": {
            "characteristics": ["Reserved", "Prefers small groups", "Recharges alone", "Thinks before speaking"],
            "advantages": ["Good listener", "Deep one-to-one connections", "Focused", "Comfortable alone"],
            "challenges": ["Overlooked in groups", "Drained by socialising", "Slow to open up"],
            "relationship_style": "You prefer quiet, intimate time with a partner over busy social calendars.",
            "career_implications": "You suit focused, independent work with limited demand for constant interaction.",
        },
        "high": {
            "characteristics": ["Outgoing", "Energetic", "Talkative", "Seeks company"],
            "advantages": ["Builds networks easily", "Energises groups", "Confident socially", "Takes initiative"],
            "challenges": ["Restless alone", "Dominates airtime", "Overcommits socially"],
            "relationship_style": "You bring energy and a full social life to a relationship and enjoy doing things together.",
            "career_implications": "You suit people-facing, high-contact roles and leadership positions.",
        },
    },
    Trait.NEUROTICISM: {
        "descriptions": {
            "exceptionally_low": "You are exceptionally low in neuroticism. You are extraordinarily calm and rarely troubled by stress.",
            "very_low": "You are very low in neuroticism. You handle stress and setbacks with notable composure.",
            "low": "You are low in neuroticism. You are emotionally stable and seldom feel strong negative emotion.",
            "moderately_low": "You are moderately low in neuroticism. You cope with stress reasonably well most of the time.",
            "typical": "You are average in neuroticism. You feel a normal range of worry and frustration.",
            "moderately_high": "You are moderately high in neuroticism. Stress and negative emotion affect you somewhat more than average.",
            "high": "You are high in neuroticism. You often feel anxious, irritable or down when under pressure.",
            "very_high": "You are very high in neuroticism. You are highly sensitive to stress and prone to strong negative emotion.",
            "exceptionally_high": "You are exceptionally high in neuroticism. Stress hits you very hard and emotional regulation is a real struggle.",
        },
        "low": {
            "characteristics": ["Calm", "Resilient", "Even-tempered", "Secure"],
            "advantages": ["Handles pressure", "Steady partner", "Recovers quickly", "Clear-headed in crises"],
            "challenges": ["Underestimates risks", "Can seem detached", "Less attuned to others' worries"],
            "relationship_style": "You are a steady, reassuring presence and stay level-headed through rough patches.",
            "career_implications": "You suit high-stakes, high-pressure roles that need a cool head.",
        },
        "high": {
            "characteristics": ["Sensitive", "Prone to worry", "Emotionally reactive", "Self-critical"],
            "advantages": ["Alert to problems", "Emotionally perceptive", "Conscientious about risk", "Empathy for struggle"],
            "challenges": ["Stress builds quickly", "Mood swings", "Rumination"],
            "relationship_style": "You feel things deeply and benefit from a patient, reassuring partner.",
            "career_implications": "You do best in supportive, predictable environments with manageable pressure.",
        },
    },
}

# ──────────────────────────────────────────────────────────────────────────────
# Summary narrative phrases
# ──────────────────────────────────────────────────────────────────────────────

TRAIT_TIER_SENTENCES: dict[Trait, dict[str, str]] = {
    Trait.AGREEABLENESS: {
        "high": "highly cooperative, trusting, and compassionate toward others",
        "moderate": "balanced between cooperation and self-advocacy",
        "low": "more competitive, sceptical, and focused on personal interests",
    },
    Trait.CONSCIENTIOUSNESS: {
        "high": "highly organised, disciplined, and goal-oriented",
        "moderate": "reasonably organised with a mix of structure and flexibility",
        "low": "more spontaneous, flexible, and adaptable to change",
    },
    Trait.EXTRAVERSION: {
        "high": "highly social, energetic, and enthusiastic in groups",
        "moderate": "comfortable in both social and solitary settings",
        "low": "more introverted, preferring quieter places and smaller groups",
    },
    Trait.NEUROTICISM: {
        "high": "more sensitive to stress and prone to emotional swings",
        "moderate": "generally stable with occasional stress reactions",
        "low": "highly stable and resilient under pressure",
    },
    Trait.OPENNESS: {
        "high": "highly creative, curious, and open to new experiences",
        "moderate": "balanced between tradition and novelty",
        "low": "more practical, traditional, and focused on proven approaches",
    },
}

TRAIT_STRENGTHS: dict[Trait, str] = {
    Trait.AGREEABLENESS: "Building strong relationships",
    Trait.CONSCIENTIOUSNESS: "Achieving goals consistently",
    Trait.EXTRAVERSION: "Energising social interactions",
    Trait.NEUROTICISM: "Maintaining emotional stability",
    Trait.OPENNESS: "Embracing new experiences",
}

TRAIT_GROWTH_AREAS: dict[Trait, str] = {
    Trait.AGREEABLENESS: "Building trust and empathy",
    Trait.CONSCIENTIOUSNESS: "Developing organisational skills",
    Trait.EXTRAVERSION: "Engaging in social connections",
    Trait.NEUROTICISM: "Managing stress and emotional regulation",
    Trait.OPENNESS: "Exploring new perspectives",
}

BALANCED_SUMMARY = (
    "You have a balanced personality profile that lets you adapt well to "
    "different relationship dynamics."
)
DOMINANT_SUMMARY = (
    "You show strong tendencies toward {traits}, which shapes how you "
    "connect with others in relationships."
)
