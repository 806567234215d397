"""
Signal catalog: 37 independent statistical / stylometric extractors.

Each extractor takes a TextDocument and returns a normalized score in
[0, 1] where > 0.6 reads as AI-like and < 0.4 as human-like. Extractors
that need a minimum sample size return the neutral 0.5 below it.

The center / steepness / direction constants are empirically tuned and
must not be changed without re-validating the whole ensemble.
"""
import math
import re
from collections import Counter
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from . import lexicons
from .statistics import (
    autocorrelation,
    clamp,
    coefficient_of_variation,
    flesch_kincaid_grade,
    normalize,
    pearson,
    shannon_entropy,
)
from .tokenizer import TextDocument, count_tokens, first_word, tokenize_words

NEUTRAL = 0.5

STYLE = 'style'
VOCABULARY = 'vocabulary'
STRUCTURE = 'structure'
SURFACE = 'surface'


def _phrase_pattern(phrase: str, bounded: bool = False) -> 're.Pattern':
    """Compile a phrase so any run of whitespace matches between its words."""
    body = r'\s+'.join(re.escape(part) for part in phrase.split())
    if bounded:
        body = r'\b' + body + r'\b'
    return re.compile(body, re.IGNORECASE | re.ASCII)


def _count_matches(patterns, text: str) -> int:
    return sum(len(p.findall(text)) for p in patterns)


_TRANSITION_PHRASE_RES = tuple(_phrase_pattern(p) for p in lexicons.TRANSITION_PHRASES)
_HEDGE_PHRASE_RES = tuple(_phrase_pattern(p) for p in lexicons.HEDGE_PHRASES)
_CLICHE_PHRASE_RES = tuple(_phrase_pattern(p) for p in lexicons.AI_CLICHE_PHRASES)
_BALANCING_RES = tuple(_phrase_pattern(p, bounded=True) for p in lexicons.BALANCING_PHRASES)

_PUNCTUATION_CLASSES = (
    re.compile(r','),
    re.compile(r';'),
    re.compile(r':'),
    re.compile(r'[\u2014\u2013]|-{2}'),
    re.compile(r'[()]'),
    re.compile(r'!'),
    re.compile(r'\?'),
    re.compile(r'\.{3}|\u2026'),
    re.compile(r'["\']'),
)

_PASSIVE_RE = re.compile(r'\b(?:was|were|is|are|been|being|be|am)\s+\w+(?:ed|en|t)\b',
                         re.IGNORECASE | re.ASCII)
_CONTRACTION_RE = re.compile(r"\b\w+'(?:t|re|ve|ll|d|m|s)\b", re.IGNORECASE | re.ASCII)
_BARE_CONTRACTION_RE = re.compile(
    r'\b(?:dont|cant|wont|isnt|wasnt|arent|werent|hasnt|havent|hadnt|shouldnt|wouldnt|'
    r'couldnt|didnt|doesnt|neednt|aint|youre|theyre|hes|shes|im|youve|theyve|weve|ive|'
    r'youll|theyll|itll|wouldve|shouldve|couldve|mustve|mightve|thats|theres|heres|'
    r'whats|wheres|whos|lets|hed|shed|theyd|wed|youd|id)\b',
    re.IGNORECASE | re.ASCII,
)

_DIGITS_RE = re.compile(r'\d+(?:[.,]\d+)*', re.ASCII)
_PROPER_NOUN_RE = re.compile(r'^[A-Z][a-z]{2,}')
_DIRECT_QUOTE_RE = re.compile('["\u201c][^"\u201d]{5,}["\u201d]')
_PAREN_RE = re.compile(r'\([^)]+\)')
_WRITTEN_NUMBER_RE = re.compile(
    r'\b(?:' + '|'.join(lexicons.NUMBER_WORDS) + r')\s+(?:'
    + '|'.join(lexicons.MEASURE_UNITS) + r')\b',
    re.IGNORECASE | re.ASCII,
)

_LIST_MARKER_RE = re.compile(
    r'\b(?:' + '|'.join(lexicons.ORDINAL_MARKERS) + r')\b[,:]?\s',
    re.IGNORECASE | re.ASCII,
)
_NUMBERED_ITEM_RE = re.compile(r'^\s*\d+[.)]\s', re.MULTILINE)
_BULLET_ITEM_RE = re.compile(r'^\s*[-\u2022*]\s', re.MULTILINE)

_INFORMAL_SPELLING_RE = re.compile(
    r'\b(?:' + '|'.join(re.escape(w) for w in lexicons.INFORMAL_SPELLINGS) + r')\b',
    re.ASCII,
)
_INFORMAL_PUNCT_RE = re.compile('\\.{2,}|\u2014|--|\u2026')
_NON_ALPHA_RE = re.compile(r'[^a-z]')
_NON_ALPHA_APOS_RE = re.compile(r"[^a-z']")
_TEMPLATE_TAIL_RE = re.compile(r'[^a-z.!?]', re.IGNORECASE | re.ASCII)


def _opener(sentence: str, keep_apostrophe: bool = False) -> str:
    strip_re = _NON_ALPHA_APOS_RE if keep_apostrophe else _NON_ALPHA_RE
    return strip_re.sub('', first_word(sentence).lower())


def _density(count: float, doc: TextDocument) -> float:
    return count / max(doc.word_count, 1)


def _per_sentence(count: float, doc: TextDocument) -> float:
    return count / max(doc.sentence_count, 1)


# ==================== INFORMATION-THEORETIC ====================

def char_trigram_entropy(doc: TextDocument) -> float:
    total = sum(doc.char_trigram_freq.values())
    entropy = shannon_entropy(doc.char_trigram_freq, total)
    return normalize(entropy, 8.6, 2.0, invert=True)


def word_entropy_ratio(doc: TextDocument) -> float:
    entropy = shannon_entropy(doc.word_freq, doc.word_count)
    max_entropy = math.log2(doc.unique_word_count or 1)
    ratio = entropy / max_entropy if max_entropy > 0 else 1.0
    return normalize(ratio, 0.92, 18.0)


def zipf_fit(doc: TextDocument) -> float:
    freqs = sorted(doc.word_freq.values(), reverse=True)
    correlation = 0.97
    if len(freqs) >= 10:
        log_ranks = np.log(np.arange(1, len(freqs) + 1))
        log_freqs = np.log(np.asarray(freqs, dtype=float))
        correlation = abs(pearson(log_ranks, log_freqs))
    return normalize(correlation, 0.94, 10.0, invert=True)


def conditional_entropy(doc: TextDocument) -> float:
    word_h = shannon_entropy(doc.word_freq, doc.word_count)
    bigram_h = shannon_entropy(doc.bigram_freq, max(doc.word_count - 1, 0))
    return normalize(max(0.0, bigram_h - word_h), 4.5, 0.6, invert=True)


def bigram_perplexity(doc: TextDocument) -> float:
    """Mean -log2 of add-0.01 smoothed P(w_i | w_i-1)."""
    if doc.word_count < 50:
        return NEUTRAL
    words = doc.words
    vocab = doc.unique_word_count
    total = 0.0
    for prev, cur in zip(words, words[1:]):
        pair_count = doc.bigram_freq.get(f'{prev} {cur}', 0)
        prev_count = doc.word_freq.get(prev) or 1
        prob = (pair_count + 0.01) / (prev_count + 0.01 * vocab)
        total += -math.log2(max(prob, 1e-10))
    steps = doc.word_count - 1
    avg = total / steps if steps > 0 else 10.0
    return normalize(avg, 8.0, 0.4, invert=True)


def sentence_entropy_variance(doc: TextDocument) -> float:
    if doc.sentence_count < 5:
        return NEUTRAL
    entropies = []
    for sentence in doc.sentences:
        tokens = tokenize_words(sentence)
        if len(tokens) < 3:
            continue
        h = shannon_entropy(Counter(tokens), len(tokens))
        if h > 0:
            entropies.append(h)
    if len(entropies) < 4:
        return NEUTRAL
    return normalize(coefficient_of_variation(entropies), 0.20, 6.0, invert=True)


def probability_smoothness(doc: TextDocument) -> float:
    """CV of 10-word sliding means of unigram surprisal."""
    if doc.word_count < 80:
        return NEUTRAL
    total = doc.word_count
    surprisal = np.array([-math.log2(doc.word_freq[w] / total) for w in doc.words])
    window = 10
    if surprisal.size < window:
        return NEUTRAL
    windows = np.lib.stride_tricks.sliding_window_view(surprisal, window)
    window_means = np.add.accumulate(windows, axis=1)[:, -1] / window
    if window_means.size < 5:
        return NEUTRAL
    return normalize(coefficient_of_variation(window_means), 0.18, 7.0, invert=True)


# ==================== RHYTHM & STRUCTURE ====================

def sentence_burstiness(doc: TextDocument) -> float:
    lengths = doc.sentence_lengths
    length_cv = coefficient_of_variation(lengths)
    diffs = [abs(b - a) for a, b in zip(lengths, lengths[1:])]
    diff_cv = coefficient_of_variation(diffs) if len(diffs) > 1 else length_cv
    return normalize((length_cv + diff_cv) / 2, 0.40, 4.5, invert=True)


def sentence_autocorrelation(doc: TextDocument) -> float:
    lengths = doc.sentence_lengths
    auto = autocorrelation(lengths) if len(lengths) >= 4 else 0.0
    return normalize(auto, 0.12, 5.0)


def paragraph_consistency(doc: TextDocument) -> float:
    if len(doc.paragraphs) <= 1:
        return NEUTRAL
    lengths = [count_tokens(p) for p in doc.paragraphs]
    return normalize(coefficient_of_variation(lengths), 0.35, 5.0, invert=True)


def readability_consistency(doc: TextDocument) -> float:
    if len(doc.paragraphs) < 3:
        return NEUTRAL
    grades = [flesch_kincaid_grade(p) for p in doc.paragraphs]
    valid = [g for g in grades if math.isfinite(g) and g > 0]
    if len(valid) < 3:
        return NEUTRAL
    return normalize(coefficient_of_variation(valid), 0.22, 5.0, invert=True)


def structure_repetition(doc: TextDocument) -> float:
    """Diversity of S/M/L sentence-size trigrams."""
    sizes = ['S' if n < 8 else 'M' if n <= 20 else 'L' for n in doc.sentence_lengths]
    if len(sizes) < 4:
        return NEUTRAL
    patterns = [''.join(sizes[i:i + 3]) for i in range(len(sizes) - 2)]
    diversity = len(set(patterns)) / len(patterns) if patterns else 1.0
    return normalize(diversity, 0.6, 5.0, invert=True)


def list_enumeration(doc: TextDocument) -> float:
    items = (
        len(_LIST_MARKER_RE.findall(doc.lower))
        + len(_NUMBERED_ITEM_RE.findall(doc.clean))
        + len(_BULLET_ITEM_RE.findall(doc.clean))
    )
    return normalize(_per_sentence(items, doc), 0.05, 15.0)


def discourse_repetition(doc: TextDocument) -> float:
    """Share of repeated 'first two words ... final mark' templates."""
    if doc.sentence_count < 6:
        return NEUTRAL
    templates = []
    for sentence in doc.sentences:
        parts = re.split(r'\s+', sentence.strip())
        if len(parts) < 3:
            continue
        head = ' '.join(_NON_ALPHA_RE.sub('', w.lower()) for w in parts[:2])
        tail = _TEMPLATE_TAIL_RE.sub('', parts[-1])[-1:]
        templates.append(f'{head}...{tail}')
    repeated = sum(1 for c in Counter(templates).values() if c >= 2)
    ratio = repeated / max(len(templates), 1)
    return normalize(ratio, 0.08, 15.0)


def ngram_repetition(doc: TextDocument) -> float:
    if doc.word_count < 100:
        return NEUTRAL
    four_grams = doc.ngrams(4)
    repeated4 = sum(1 for c in Counter(four_grams).values() if c >= 2)
    repeated5 = sum(1 for c in Counter(doc.ngrams(5)).values() if c >= 2)
    density = (repeated4 + repeated5 * 2) / max(len(four_grams), 1)
    return normalize(density, 0.02, 50.0)


# ==================== STYLE ====================

def transition_density(doc: TextDocument) -> float:
    count = sum(1 for w in doc.words if w in lexicons.TRANSITION_WORDS)
    count += _count_matches(_TRANSITION_PHRASE_RES, doc.lower)
    return normalize(_density(count, doc), 0.015, 100.0)


def filler_absence(doc: TextDocument) -> float:
    count = sum(1 for w in doc.words if w in lexicons.FILLER_WORDS)
    count += _count_matches(_HEDGE_PHRASE_RES, doc.lower)
    return normalize(_density(count, doc), 0.02, 120.0, invert=True)


def contraction_rate(doc: TextDocument) -> float:
    count = len(_CONTRACTION_RE.findall(doc.clean)) + len(_BARE_CONTRACTION_RE.findall(doc.clean))
    return normalize(_density(count, doc), 0.015, 80.0, invert=True)


def first_person_density(doc: TextDocument) -> float:
    count = sum(1 for w in doc.words if w in lexicons.FIRST_PERSON_PRONOUNS)
    return normalize(_density(count, doc), 0.015, 80.0, invert=True)


def sentence_openers(doc: TextDocument) -> float:
    starters = [_opener(s) for s in doc.sentences]
    transition_starts = sum(1 for w in starters if w in lexicons.TRANSITION_STARTERS)
    transition_score = normalize(_per_sentence(transition_starts, doc), 0.08, 20.0)

    diversity = len(set(starters)) / doc.sentence_count if doc.sentence_count > 1 else 1.0
    diversity_score = normalize(diversity, 0.7, 6.0, invert=True)

    if transition_starts > 0:
        return transition_score * 0.7 + diversity_score * 0.3
    return diversity_score


def formal_adverb_density(doc: TextDocument) -> float:
    count = sum(1 for w in doc.words if w in lexicons.AI_ADVERBS)
    return normalize(_density(count, doc), 0.008, 180.0)


def tonal_neutrality(doc: TextDocument) -> float:
    opinions = sum(1 for w in doc.words if w in lexicons.STRONG_OPINION_WORDS)
    balancing = _count_matches(_BALANCING_RES, doc.lower)
    opinion_density = _density(opinions, doc)
    balance_density = _density(balancing, doc)

    if opinion_density < 0.005 and balance_density > 0.005:
        return 0.68
    if opinion_density < 0.005:
        return 0.58
    if opinion_density > 0.015:
        return 0.32
    if opinion_density > 0.01:
        return 0.40
    return NEUTRAL


# ==================== VOCABULARY ====================

def lexical_sophistication(doc: TextDocument) -> float:
    rare = sum(1 for w in doc.words if w not in lexicons.COMMON_WORDS)
    deviation = abs(_density(rare, doc) - 0.55)
    return normalize(deviation, 0.1, 10.0, invert=True)


def word_length_distribution(doc: TextDocument) -> float:
    histogram = Counter(min(len(w), 15) for w in doc.words)
    return normalize(coefficient_of_variation(histogram.values()), 1.0, 2.0, invert=True)


def trigram_diversity(doc: TextDocument) -> float:
    trigrams = doc.ngrams(3)
    diversity = len(set(trigrams)) / len(trigrams) if trigrams else 1.0
    return normalize(diversity, 0.95, 15.0)


def cliche_density(doc: TextDocument) -> float:
    word_hits = sum(1 for w in doc.words if w in lexicons.AI_CLICHE_WORDS)
    phrase_hits = _count_matches(_CLICHE_PHRASE_RES, doc.lower)
    return normalize(_density(word_hits + phrase_hits * 3, doc), 0.015, 150.0)


def hapax_ratio(doc: TextDocument) -> float:
    if doc.word_count < 400:
        return NEUTRAL
    hapax = sum(1 for c in doc.word_freq.values() if c == 1)
    ratio = hapax / max(doc.unique_word_count, 1)
    return normalize(ratio, 0.50, 8.0, invert=True)


def specificity(doc: TextDocument) -> float:
    """Concrete detail per word: numbers, names, quotes, parentheticals."""
    points = min(len(_DIGITS_RE.findall(doc.clean)) * 1.5, 15)

    proper_nouns = 0
    for sentence in doc.sentences:
        tokens = re.split(r'\s+', sentence.strip())
        proper_nouns += sum(1 for t in tokens[1:] if _PROPER_NOUN_RE.match(t))
    points += min(proper_nouns * 1.5, 12)

    points += len(_DIRECT_QUOTE_RE.findall(doc.clean)) * 4
    points += len(_PAREN_RE.findall(doc.clean)) * 2
    points += len(_WRITTEN_NUMBER_RE.findall(doc.lower)) * 2

    return normalize(_density(points, doc), 0.04, 30.0, invert=True)


def vocabulary_level_variance(doc: TextDocument) -> float:
    if len(doc.paragraphs) < 3:
        return NEUTRAL
    ratios = []
    for paragraph in doc.paragraphs:
        tokens = tokenize_words(paragraph)
        if len(tokens) < 5:
            continue
        rare = sum(1 for w in tokens if w not in lexicons.COMMON_WORDS)
        ratios.append(rare / len(tokens))
    if len(ratios) < 3:
        return NEUTRAL
    return normalize(coefficient_of_variation(ratios), 0.15, 7.0, invert=True)


def function_word_profile(doc: TextDocument) -> float:
    if doc.word_count < 80:
        return NEUTRAL
    wc = doc.word_count
    category_ratios = []
    total = 0
    for _, members in lexicons.FUNCTION_WORD_CATEGORIES:
        count = sum(1 for w in doc.words if w in members)
        category_ratios.append(count / wc)
        total += count
    density = total / wc
    balance_cv = coefficient_of_variation(category_ratios)

    score = 0.5
    if 0.42 <= density <= 0.50:
        score += 0.1
    if density > 0.52:
        score -= 0.08
    if balance_cv < 0.6:
        score += 0.08
    if balance_cv > 0.9:
        score -= 0.06
    return clamp(score, 0.1, 0.9)


# ==================== SURFACE ====================

def punctuation_diversity(doc: TextDocument) -> float:
    used = sum(1 for p in _PUNCTUATION_CLASSES if p.search(doc.clean))
    return normalize(used / len(_PUNCTUATION_CLASSES), 0.4, 5.0, invert=True)


def question_exclamation_ratio(doc: TextDocument) -> float:
    marks = doc.clean.count('?') + doc.clean.count('!')
    return normalize(_per_sentence(marks, doc), 0.08, 12.0, invert=True)


def _sentence_type(sentence: str) -> str:
    stripped = sentence.strip()
    if stripped.endswith('?'):
        return 'Q'
    if stripped.endswith('!'):
        return 'E'
    if _opener(stripped, keep_apostrophe=True) in lexicons.IMPERATIVE_STARTERS:
        return 'I'
    return 'D'


def sentence_type_variety(doc: TextDocument) -> float:
    variety = len({_sentence_type(s) for s in doc.sentences}) / 4
    return normalize(variety, 0.35, 5.0, invert=True)


def passive_voice(doc: TextDocument) -> float:
    matches = len(_PASSIVE_RE.findall(doc.clean))
    return normalize(_per_sentence(matches, doc), 0.15, 7.0)


def emotional_flatness(doc: TextDocument) -> float:
    if doc.sentence_count < 4:
        return NEUTRAL
    scores = []
    for sentence in doc.sentences:
        score = 0
        for w in tokenize_words(sentence):
            if w in lexicons.POSITIVE_EMOTION_WORDS:
                score += 1
            if w in lexicons.NEGATIVE_EMOTION_WORDS:
                score -= 1
        scores.append(score)
    magnitude_cv = coefficient_of_variation(abs(s) for s in scores)
    spread = max(scores) - min(scores)
    if spread < 2 and magnitude_cv < 0.5:
        return 0.65
    if spread < 3:
        return 0.5
    return 0.3


def conjunction_starts(doc: TextDocument) -> float:
    count = sum(1 for s in doc.sentences if _opener(s) in lexicons.CONJUNCTION_STARTERS)
    return normalize(_per_sentence(count, doc), 0.04, 20.0, invert=True)


def grammar_perfection(doc: TextDocument) -> float:
    """Imperfections per sentence; none at all reads as machine-polished."""
    fragments = sum(1 for s in doc.sentences if 1 <= count_tokens(s.strip()) <= 3)

    words = doc.words
    repeats = sum(
        1 for prev, cur in zip(words, words[1:])
        if cur == prev and cur not in lexicons.ALLOWED_REPEATS
    )

    informal = len(_INFORMAL_SPELLING_RE.findall(doc.lower))

    lowercase_starts = 0
    for sentence in doc.sentences:
        head = sentence.strip()[:1]
        if 'a' <= head <= 'z':
            lowercase_starts += 1

    informal_punct = len(_INFORMAL_PUNCT_RE.findall(doc.clean))

    total = fragments + repeats + informal + lowercase_starts + informal_punct
    return normalize(_per_sentence(total, doc), 0.12, 8.0, invert=True)


# ==================== CATALOG ====================

@dataclass(frozen=True)
class SignalSpec:
    key: str
    name: str
    category: str
    weight: float
    icon: str
    high_description: str
    low_description: str
    extractor: Callable[[TextDocument], float]


SIGNAL_CATALOG: Tuple[SignalSpec, ...] = (
    SignalSpec('char_trigram_entropy', 'Character Entropy', SURFACE, 0.012, 'hash',
               'Low character entropy — predictable patterns typical of AI',
               'High character entropy — natural unpredictability',
               char_trigram_entropy),
    SignalSpec('word_entropy_ratio', 'Word Distribution', VOCABULARY, 0.012, 'bar-chart',
               'Unusually uniform word distribution — suggests generation',
               'Natural word frequency distribution',
               word_entropy_ratio),
    SignalSpec('zipf_fit', "Zipf's Law Fit", VOCABULARY, 0.012, 'trending-down',
               "Word frequencies deviate from Zipf's law — AI pattern",
               "Word frequencies follow natural Zipf's law distribution",
               zipf_fit),
    SignalSpec('conditional_entropy', 'Word Predictability', VOCABULARY, 0.012, 'cpu',
               'Low conditional entropy — highly predictable word sequences',
               'Natural word sequence unpredictability',
               conditional_entropy),
    SignalSpec('sentence_burstiness', 'Sentence Burstiness', STRUCTURE, 0.04, 'ruler',
               'Uniform sentence lengths — typical of AI writing',
               'Good variation in sentence lengths — natural writing',
               sentence_burstiness),
    SignalSpec('sentence_autocorrelation', 'Sentence Autocorrelation', STRUCTURE, 0.012, 'repeat',
               'Adjacent sentences have similar lengths — templated pattern',
               'Natural variation between adjacent sentences',
               sentence_autocorrelation),
    SignalSpec('paragraph_consistency', 'Paragraph Consistency', STRUCTURE, 0.015, 'align-left',
               'Paragraphs are uniform in length — AI pattern',
               'Natural paragraph length variation',
               paragraph_consistency),
    SignalSpec('readability_consistency', 'Readability Consistency', STRUCTURE, 0.025, 'book',
               'Uniform readability across paragraphs — AI pattern',
               'Natural readability variation across paragraphs',
               readability_consistency),
    SignalSpec('structure_repetition', 'Structure Repetition', STRUCTURE, 0.012, 'sliders',
               'Repetitive sentence structure patterns detected',
               'Diverse sentence structure patterns',
               structure_repetition),
    SignalSpec('transition_density', 'Transition Word Density', STYLE, 0.065, 'link',
               'High transition word density — very common in AI text',
               'Natural transition word usage',
               transition_density),
    SignalSpec('filler_absence', 'Filler Word Absence', STYLE, 0.065, 'message-circle',
               'No filler/hedge words — AI text avoids informal markers',
               'Natural use of filler and hedge words',
               filler_absence),
    SignalSpec('punctuation_diversity', 'Punctuation Diversity', SURFACE, 0.015, 'type',
               'Limited punctuation variety — AI typically uses few types',
               'Rich punctuation variety — natural writing style',
               punctuation_diversity),
    SignalSpec('question_exclamation_ratio', 'Questions & Exclamations', SURFACE, 0.015, 'edit',
               'No questions or exclamations — AI defaults to declarative',
               'Natural mix of sentence types',
               question_exclamation_ratio),
    SignalSpec('sentence_type_variety', 'Sentence Type Variety', SURFACE, 0.015, 'file-text',
               'Only declarative sentences — AI pattern',
               'Mix of declarative, interrogative, imperative sentences',
               sentence_type_variety),
    SignalSpec('passive_voice', 'Passive Voice Usage', SURFACE, 0.025, 'settings',
               'Elevated passive voice usage — formal AI writing style',
               'Mostly active voice — natural writing style',
               passive_voice),
    SignalSpec('contraction_rate', 'Contraction Usage', STYLE, 0.04, 'file',
               'No contractions used — AI formal writing pattern',
               'Natural use of contractions',
               contraction_rate),
    SignalSpec('first_person_density', 'First-Person Pronouns', STYLE, 0.04, 'user',
               'No first-person pronouns — impersonal AI style',
               'Personal voice with first-person pronouns',
               first_person_density),
    SignalSpec('lexical_sophistication', 'Lexical Sophistication', VOCABULARY, 0.012, 'book',
               'Vocabulary profile matches AI generation patterns',
               'Vocabulary profile suggests human authorship',
               lexical_sophistication),
    SignalSpec('word_length_distribution', 'Word Length Distribution', VOCABULARY, 0.008, 'bar-chart',
               'Smooth word length distribution — algorithmically generated',
               'Natural word length distribution',
               word_length_distribution),
    SignalSpec('trigram_diversity', 'Phrase Uniqueness', VOCABULARY, 0.008, 'repeat',
               'Extremely high phrase uniqueness — AI varied phrasing',
               'Natural phrase repetition patterns',
               trigram_diversity),
    SignalSpec('cliche_density', 'AI Cliché Detection', VOCABULARY, 0.11, 'alert-triangle',
               'AI-typical buzzwords and phrases detected (delve, leverage, tapestry, etc.)',
               'No distinctive AI language patterns found',
               cliche_density),
    SignalSpec('sentence_openers', 'Sentence Opener Patterns', STYLE, 0.04, 'list',
               'Transition-word sentence starters — formulaic AI pattern',
               'Natural sentence openings',
               sentence_openers),
    SignalSpec('hapax_ratio', 'Vocabulary Uniqueness', VOCABULARY, 0.012, 'feather',
               'Low hapax ratio — AI reuses words more uniformly',
               'High ratio of unique words — natural vocabulary',
               hapax_ratio),
    SignalSpec('specificity', 'Content Specificity', VOCABULARY, 0.055, 'hash',
               'Vague, general statements without specific details — AI pattern',
               'Specific details, numbers, names, quotes — human authorship',
               specificity),
    SignalSpec('bigram_perplexity', 'Bigram Perplexity', VOCABULARY, 0.04, 'cpu',
               'Low perplexity — statistically smooth, AI-like word sequences',
               'High perplexity — unexpected word choices, human-like',
               bigram_perplexity),
    SignalSpec('sentence_entropy_variance', 'Sentence Complexity Variance', STRUCTURE, 0.025, 'bar-chart',
               'Uniform sentence complexity — AI maintains constant level',
               'Varying sentence complexity — natural writing pattern',
               sentence_entropy_variance),
    SignalSpec('formal_adverb_density', 'Formal Adverb Density', STYLE, 0.035, 'type',
               'Heavy use of formal adverbs (significantly, importantly, etc.) — AI pattern',
               'Natural adverb usage',
               formal_adverb_density),
    SignalSpec('list_enumeration', 'List/Enumeration Pattern', STRUCTURE, 0.02, 'list',
               'Structured enumeration detected — AI frequently uses numbered/ordered lists',
               'No excessive list patterns detected',
               list_enumeration),
    SignalSpec('emotional_flatness', 'Emotional Flatness', SURFACE, 0.018, 'message-circle',
               'Flat emotional tone throughout — AI lacks emotional variation',
               'Natural emotional variation present',
               emotional_flatness),
    SignalSpec('vocabulary_level_variance', 'Vocabulary Level Variance', VOCABULARY, 0.018, 'book',
               'Constant vocabulary sophistication across paragraphs — AI pattern',
               'Natural variation in vocabulary sophistication',
               vocabulary_level_variance),
    SignalSpec('discourse_repetition', 'Discourse Repetition', STRUCTURE, 0.018, 'repeat',
               'Repetitive sentence templates detected — AI structural pattern',
               'Diverse sentence templates — natural writing',
               discourse_repetition),
    SignalSpec('conjunction_starts', 'Conjunction Patterns', SURFACE, 0.012, 'link',
               'No informal conjunction starters — formal AI writing style',
               'Natural use of conjunctions to start sentences',
               conjunction_starts),
    SignalSpec('probability_smoothness', 'Probability Smoothness', STRUCTURE, 0.03, 'trending-down',
               'Smooth token probability curve — AI selects high-probability tokens',
               'Jagged probability curve — human makes unexpected word choices',
               probability_smoothness),
    SignalSpec('function_word_profile', 'Function Word Profile', VOCABULARY, 0.02, 'feather',
               'Function word distribution matches AI generation patterns',
               'Function word distribution matches natural writing',
               function_word_profile),
    SignalSpec('grammar_perfection', 'Grammar Perfection', SURFACE, 0.047, 'edit',
               'Suspiciously perfect grammar — no typos, fragments, or informal usage',
               'Natural imperfections present — human writing characteristics',
               grammar_perfection),
    SignalSpec('tonal_neutrality', 'Tonal Neutrality', STYLE, 0.025, 'sliders',
               'Balanced, neutral tone — AI avoids strong opinions',
               'Clear opinions and emotional expression — human voice',
               tonal_neutrality),
    SignalSpec('ngram_repetition', 'N-gram Repetition', STRUCTURE, 0.015, 'hash',
               'Repeated 4/5-gram phrases detected — AI structural repetition',
               'Low phrase repetition — diverse expression',
               ngram_repetition),
)

SIGNALS_BY_KEY: Dict[str, SignalSpec] = {spec.key: spec for spec in SIGNAL_CATALOG}


def extract_scores(doc: TextDocument, catalog: Optional[Tuple[SignalSpec, ...]] = None) -> List[Tuple[SignalSpec, float]]:
    """Run every extractor in catalog order."""
    catalog = catalog or SIGNAL_CATALOG
    return [(spec, float(spec.extractor(doc))) for spec in catalog]
