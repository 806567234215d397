"""
Static word and phrase tables used by the signal extractors.

Everything here is an immutable constant built once at import time and
shared by every analysis.
"""

# Top 200 most common English words
COMMON_WORDS = frozenset([
    'the', 'be', 'to', 'of', 'and', 'a', 'in', 'that', 'have', 'i', 'it', 'for', 'not', 'on',
    'with', 'he', 'as', 'you', 'do', 'at', 'this', 'but', 'his', 'by', 'from', 'they', 'we',
    'say', 'her', 'she', 'or', 'an', 'will', 'my', 'one', 'all', 'would', 'there', 'their',
    'what', 'so', 'up', 'out', 'if', 'about', 'who', 'get', 'which', 'go', 'me', 'when',
    'make', 'can', 'like', 'time', 'no', 'just', 'him', 'know', 'take', 'people', 'into',
    'year', 'your', 'good', 'some', 'could', 'them', 'see', 'other', 'than', 'then', 'now',
    'look', 'only', 'come', 'its', 'over', 'think', 'also', 'back', 'after', 'use', 'two',
    'how', 'our', 'work', 'first', 'well', 'way', 'even', 'new', 'want', 'because', 'any',
    'these', 'give', 'day', 'most', 'us', 'great', 'very', 'much', 'before', 'between',
    'still', 'should', 'been', 'through', 'where', 'too', 'find', 'here', 'thing', 'many',
    'those', 'long', 'made', 'world', 'own', 'while', 'last', 'might', 'such', 'end',
    'never', 'both', 'old', 'each', 'tell', 'does', 'set', 'three', 'had', 'has', 'was',
    'were', 'are', 'is', 'am', 'did', 'being', 'more', 'may', 'down', 'part', 'same',
    'around', 'every', 'must', 'place', 'small', 'right', 'big', 'few', 'off', 'keep',
    'help', 'put', 'another', 'hand', 'high', 'again', 'under', 'once', 'man', 'woman',
    'life', 'child', 'home', 'need', 'house', 'why', 'let', 'head', 'point', 'far', 'turn',
    'move', 'left', 'run', 'real', 'group', 'start', 'call', 'ask', 'began', 'seem', 'show',
    'hear', 'play', 'number', 'change', 'state',
])

# Buzzwords disproportionately produced by language models. Hyphenated
# entries never match a single word token and are kept for completeness.
AI_CLICHE_WORDS = frozenset([
    'delve', 'tapestry', 'landscape', 'leverage', 'utilize', 'facilitate',
    'multifaceted', 'comprehensive', 'robust', 'nuanced', 'pivotal', 'paramount',
    'intricate', 'meticulous', 'holistic', 'streamline', 'foster', 'encompass',
    'embark', 'underscore', 'interplay', 'showcasing', 'navigating', 'underscores',
    'harness', 'spearhead', 'bolster', 'elucidate', 'cornerstone', 'synergy',
    'groundbreaking', 'transformative', 'noteworthy', 'commendable', 'invaluable',
    'indispensable', 'testament', 'realm', 'myriad', 'plethora',
    'harnessing', 'crafting', 'elevate', 'optimize', 'strategically', 'proactively',
    'seamlessly', 'endeavor', 'adept', 'proficient',
    'burgeoning', 'thriving', 'vibrant', 'bustling',
    'captivating', 'enthralling', 'resonate', 'reverberate',
    'accentuate', 'illuminate', 'demystify', 'unravel',
    'spearheading', 'orchestrating', 'catalyzing', 'galvanizing', 'propelling',
    'arguably', 'undeniably', 'unequivocally', 'quintessential',
    'imperative', 'conducive', 'elucidating', 'delineate', 'juxtapose',
    'juxtaposition', 'paradigm', 'paradigmatic', 'synergistic', 'synergize',
    'ideate', 'ideation', 'actionable', 'scalable', 'impactful',
    'operationalize', 'incentivize', 'conceptualize', 'contextualize',
    'revolutionize', 'reimagine', 'reinvent', 'reimagining',
    'underpin', 'underpinning', 'overarching', 'intersectionality',
    'intersecting', 'multifarious', 'manifold', 'discerning',
    'astute', 'judicious', 'exemplary', 'laudable',
    'formidable', 'unwavering', 'steadfast', 'relentless', 'tenacious',
    'poignant', 'evocative', 'visceral', 'palpable', 'tangible',
    'intangible', 'ephemeral', 'transcendent', 'unprecedented',
    'unparalleled', 'seminal', 'watershed', 'monumental',
    'instrumental', 'consequential', 'substantive', 'quintessentially',
    'reimagined', 'curated', 'curating', 'bespoke',
    'tailor', 'tailored', 'tailor-made', 'fine-tuned',
    'cutting-edge', 'state-of-the-art', 'thought-provoking',
    'game-changing', 'trailblazing', 'pioneering',
    'ever-evolving', 'ever-changing', 'ever-growing', 'ever-increasing',
    'aforementioned', 'hitherto', 'heretofore', 'notwithstanding',
    'therein', 'thereof', 'whereby', 'whilst',
])

AI_CLICHE_PHRASES = (
    "it's important to note", "it is important to note", "it's worth noting",
    "it is worth noting", "it bears mentioning", "in today's world",
    "in today's digital age", "in today's fast-paced", "in the realm of",
    "plays a crucial role", "plays a vital role", "plays a key role",
    "plays an important role", "is a testament to", "stands as a testament",
    "serves as a reminder", "serves as a testament", "paves the way",
    "shed light on", "sheds light on", "shedding light on", "dive deep into",
    "let's dive in", "let's delve into", "a myriad of", "a plethora of",
    "at the end of the day", "it goes without saying", "when it comes to",
    "in this day and age", "the landscape of", "the realm of",
    "it cannot be overstated", "cannot be understated",
    "in a nutshell", "the bottom line is", "the key takeaway",
    "moving forward", "going forward", "looking ahead",
    "the importance of", "the significance of", "the impact of",
    "has become increasingly", "is becoming increasingly",
    "whether you're a", "whether you are a",
    "not only but also", "first and foremost", "last but not least",
    "in order to", "due to the fact", "the fact that",
    "on the other hand", "having said that", "that being said",
    "it should come as no surprise", "comes as no surprise",
    "are well-positioned", "is well-positioned",
    "offers a unique", "offers valuable", "provides valuable",
    "can be a game", "is a game-changer",
    "are you looking to", "if you're looking to", "if you are looking to",
    "in the ever-evolving", "in an ever-changing",
    "a comprehensive guide", "a step-by-step guide",
    "from understanding", "from exploring", "from analyzing",
    "by understanding", "by exploring", "by leveraging",
    "this comprehensive", "this article will", "this guide will",
    "without further ado", "with that in mind", "with this in mind",
    "it is crucial to", "it is essential to", "it is imperative to",
    "it is noteworthy that", "it is evident that", "it is clear that",
    "it is undeniable that", "it is worth mentioning", "it is safe to say",
    "there is no denying", "there is no doubt", "needless to say",
    "as we navigate", "as we delve", "as we explore",
    "one cannot overstate", "one cannot underestimate",
    "in an increasingly", "in our increasingly",
    "stands out as", "stands as a", "serves as a cornerstone",
    "serves as a catalyst", "acts as a catalyst",
    "the cornerstone of", "the bedrock of", "the crux of",
    "the epitome of", "the pinnacle of", "the hallmark of",
    "a deep dive into", "taking a closer look", "a holistic approach",
    "a nuanced understanding", "a comprehensive understanding",
    "a fundamental shift", "a paradigm shift",
    "strikes a balance", "navigating the complexities",
    "at its core", "at the heart of", "at the forefront of",
    "is poised to", "are poised to", "well-positioned to",
    "on a deeper level", "to a large extent", "to a great extent",
    "a wide range of", "a broad spectrum of", "a diverse range of",
    "the intricacies of", "the nuances of", "the complexities of",
    "in light of", "in the wake of", "in the context of",
    "is not without its challenges", "is not without its limitations",
    "the ever-growing", "the ever-expanding", "the rapidly evolving",
    "a testament to the", "a reflection of", "a manifestation of",
    "fosters a sense of", "cultivates a sense of",
    "the overarching goal", "the overarching theme",
    "embracing the", "harnessing the power", "unlocking the potential",
    "bridging the gap", "closing the gap", "filling the void",
    "a wealth of", "a treasure trove", "an abundance of",
    "the fabric of", "the tapestry of", "woven into the fabric",
    "reshaping the", "redefining the", "revolutionizing the",
    "it becomes evident", "it becomes clear", "it becomes apparent",
    "to put it simply", "simply put", "to sum up",
    "a double-edged sword", "a slippery slope",
    "the tip of the iceberg", "scratch the surface",
    "food for thought", "a wake-up call",
)

# Formal adverbs language models overuse
AI_ADVERBS = frozenset([
    'significantly', 'importantly', 'effectively', 'efficiently', 'essentially',
    'fundamentally', 'particularly', 'specifically', 'notably', 'remarkably',
    'considerably', 'substantially', 'profoundly', 'increasingly', 'predominantly',
    'inherently', 'intrinsically', 'invariably', 'inevitably', 'undoubtedly',
    'unquestionably', 'indisputably', 'categorically', 'overwhelmingly',
    'disproportionately', 'exponentially', 'systematically', 'holistically',
    'strategically', 'proactively', 'meticulously', 'seamlessly', 'effortlessly',
    'comprehensively', 'thoroughly', 'rigorously', 'robustly',
])

TRANSITION_WORDS = frozenset([
    'however', 'furthermore', 'moreover', 'additionally', 'consequently',
    'nevertheless', 'therefore', 'thus', 'hence', 'accordingly', 'specifically',
    'importantly', 'significantly', 'essentially', 'particularly', 'notably',
    'indeed', 'certainly', 'undoubtedly', 'clearly', 'obviously', 'evidently',
    'interestingly', 'surprisingly', 'ultimately', 'fundamentally',
    'firstly', 'secondly', 'thirdly', 'finally', 'lastly', 'meanwhile',
])

TRANSITION_PHRASES = (
    'in conclusion', 'to summarize', 'in summary', 'in addition',
    'on the other hand', 'in contrast', 'as a result', 'for example',
    'for instance', 'in particular', 'in fact', 'above all',
    'to begin with', 'in other words', 'that is to say',
    'as mentioned', 'it is worth noting', 'it is important to note',
    'it should be noted', 'on the contrary', 'by contrast',
    'as a consequence', 'in this regard', 'to that end',
)

FILLER_WORDS = frozenset([
    'well', 'basically', 'actually', 'literally', 'honestly', 'like', 'kinda',
    'sorta', 'gonna', 'wanna', 'gotta', 'um', 'uh', 'hmm', 'oh', 'wow', 'yeah',
    'yep', 'nah', 'anyway', 'anyways', 'stuff', 'things', 'whatever', 'pretty',
    'really', 'very', 'quite', 'just', 'maybe', 'perhaps', 'probably', 'guess',
    'suppose', 'ok', 'okay', 'right', 'cool', 'sure', 'hey', 'huh', 'whoa',
    'damn', 'dude', 'totally', 'definitely', 'absolutely', 'seriously',
])

HEDGE_PHRASES = (
    'i think', 'i guess', 'i mean', 'you know', 'kind of', 'sort of',
    'i suppose', 'i feel like', 'to be honest', 'in my opinion',
    'if you ask me', 'not sure', 'i believe', 'i reckon',
)

IMPERATIVE_STARTERS = frozenset([
    'do', "don't", 'please', 'let', 'try', 'make', 'keep', 'take', 'give', 'go',
    'come', 'look', 'see', 'get', 'put', 'use', 'find', 'tell', 'ask', 'stop',
    'start', 'run', 'read', 'write', 'think', 'consider', 'remember', 'note',
    'check', 'ensure', 'avoid', 'imagine', 'listen', 'watch', 'wait', 'be',
])

# Sentence openers that mark a formulaic transition
TRANSITION_STARTERS = frozenset([
    'furthermore', 'moreover', 'additionally', 'consequently', 'nevertheless',
    'therefore', 'thus', 'hence', 'accordingly', 'specifically', 'importantly',
    'significantly', 'essentially', 'particularly', 'notably', 'indeed',
    'certainly', 'undoubtedly', 'clearly', 'obviously', 'evidently',
    'interestingly', 'surprisingly', 'ultimately', 'fundamentally',
    'firstly', 'secondly', 'thirdly', 'finally', 'lastly', 'meanwhile',
    'however', 'similarly', 'likewise', 'conversely', 'alternatively',
    'overall', 'subsequently',
])

FIRST_PERSON_PRONOUNS = frozenset([
    'i', 'me', 'my', 'mine', 'myself', 'we', 'us', 'our', 'ours', 'ourselves',
])

CONJUNCTION_STARTERS = frozenset(['and', 'but', 'or', 'so', 'yet', 'for', 'nor'])

POSITIVE_EMOTION_WORDS = frozenset([
    'love', 'happy', 'great', 'wonderful', 'amazing', 'excellent', 'fantastic',
    'beautiful', 'incredible', 'awesome', 'brilliant', 'delighted', 'thrilled',
    'excited', 'grateful', 'blessed', 'joyful', 'glad', 'proud', 'pleased',
])

NEGATIVE_EMOTION_WORDS = frozenset([
    'hate', 'terrible', 'horrible', 'awful', 'disgusting', 'angry', 'furious',
    'sad', 'miserable', 'depressed', 'frustrated', 'annoyed', 'disappointed',
    'worried', 'scared', 'afraid', 'devastated', 'heartbroken', 'painful', 'ugly',
])

# Stylometric function-word categories. Some words ('that', 'for')
# belong to more than one category and are counted in each.
FUNCTION_WORD_CATEGORIES = (
    ('articles', frozenset(['the', 'a', 'an'])),
    ('prepositions', frozenset([
        'of', 'in', 'to', 'for', 'with', 'on', 'at', 'from', 'by', 'about', 'as', 'into',
        'through', 'during', 'before', 'after', 'above', 'below', 'between', 'under',
    ])),
    ('pronouns', frozenset([
        'i', 'me', 'my', 'we', 'us', 'our', 'you', 'your', 'he', 'him', 'his', 'she',
        'her', 'they', 'them', 'their', 'it', 'its',
    ])),
    ('auxiliaries', frozenset([
        'is', 'are', 'was', 'were', 'be', 'been', 'being', 'have', 'has', 'had', 'do',
        'does', 'did', 'will', 'would', 'shall', 'should', 'may', 'might', 'can',
        'could', 'must',
    ])),
    ('conjunctions', frozenset([
        'and', 'but', 'or', 'nor', 'for', 'yet', 'so', 'because', 'although', 'while',
        'if', 'when', 'that', 'which', 'who',
    ])),
    ('determiners', frozenset([
        'this', 'that', 'these', 'those', 'each', 'every', 'some', 'any', 'no', 'all',
        'both', 'few', 'many', 'much', 'several',
    ])),
)

STRONG_OPINION_WORDS = frozenset([
    'terrible', 'amazing', 'horrible', 'incredible', 'disgusting', 'wonderful',
    'stupid', 'brilliant', 'garbage', 'genius', 'insane', 'ridiculous',
    'absolutely', 'definitely', 'obviously', 'clearly', 'unfortunately',
    'honestly', 'frankly', 'basically', 'literally', 'seriously',
    'best', 'worst', 'perfect', 'awful', 'rubbish', 'spectacular',
])

BALANCING_PHRASES = (
    'however', 'although', 'nevertheless', 'on the other hand', 'while',
    'that said', 'admittedly', 'arguably', 'granted', 'regardless',
    'despite', 'notwithstanding', 'in contrast', 'conversely', 'yet',
)

# Repeated adjacent words that are usually intentional ("had had")
ALLOWED_REPEATS = frozenset(['very', 'had', 'that'])

INFORMAL_SPELLINGS = (
    'gonna', 'wanna', 'gotta', 'kinda', 'sorta', 'dunno', 'lemme', 'gimme', 'ya',
    'yall', "y'all", 'nope', 'yep', 'yup', 'haha', 'lol', 'omg', 'btw', 'imo', 'tbh',
    'idk', 'smh', 'ngl', 'fr', 'bruh', 'bro', 'sis', 'fam', 'lowkey', 'highkey',
    'sus', 'vibe', 'vibes', 'slay', 'lit', 'fire', 'cap', 'bet',
)

ORDINAL_MARKERS = (
    'firstly', 'secondly', 'thirdly', 'fourthly', 'fifthly',
    'first', 'second', 'third', 'fourth', 'fifth',
)

NUMBER_WORDS = (
    'one', 'two', 'three', 'four', 'five', 'six', 'seven', 'eight', 'nine', 'ten',
    'eleven', 'twelve', 'twenty', 'thirty', 'forty', 'fifty', 'hundred', 'thousand',
)

MEASURE_UNITS = (
    'hours?', 'minutes?', 'seconds?', 'days?', 'weeks?', 'months?', 'years?',
    'miles?', 'feet', 'inches?', 'meters?', 'percent', 'people', 'students?',
    'participants?', 'times?',
)
