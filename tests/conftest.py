"""Shared sample texts for the detector tests."""
import sys
from pathlib import Path

import pytest

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent / 'backend'))


AI_STYLE_TEXT = """\
It is important to note that modern organizations must delve into the tapestry of digital transformation. Furthermore, leaders should leverage a holistic approach to foster innovation and streamline operations. Moreover, it is crucial to navigate the complex landscape of emerging technologies.

Additionally, teams can harness robust frameworks to enhance collaboration. Consequently, this comprehensive strategy empowers stakeholders to unlock their full potential. It is important to note that a seamless integration of tools plays a pivotal role in this journey. Furthermore, leaders should delve into the tapestry of shared values.

In conclusion, organizations that leverage a holistic approach will thrive in an ever-evolving landscape. Furthermore, they must delve into the tapestry of data to gain invaluable insights. Ultimately, this multifaceted paradigm underscores the significance of continuous improvement. Therefore, it is essential to embrace innovation and cultivate a culture of excellence that drives meaningful growth."""

CASUAL_TEXT = """\
Okay so honestly I kinda messed up my sourdough again yesterday. I'd left it on the counter way too long, like nine hours, and it basically turned into soup! My roommate Dave walked in and just laughed at me. Rude.

Anyway I'm gonna try again this weekend. I think my starter's fine, it's just me being lazy about timing stuff. My mom says I should use the fridge overnight but I don't really trust that, idk. She's been baking for like thirty years though so maybe I should listen lol. Why is bread so hard?

Also the oven in this apartment is weird. It runs hot on the left side and I've burned two loaves already because of it. Ugh. If anyone's got tips, seriously, I'm all ears. And no, I'm not buying a fancy dutch oven. I'll post pics if it works out, or if it's another disaster you'll hear about that too haha."""

SHORT_TEXT = (
    'The committee met on Tuesday to review the budget. Several members raised concerns '
    'about travel costs. The chair agreed to revisit the numbers next month. Nobody objected, '
    'and the meeting ended early for once.'
)

REPEATED_WORD_TEXT = ' '.join(['Wonderful.'] * 9)


@pytest.fixture
def detector():
    """Create a fresh detector instance"""
    from text_detector import AIContentDetector
    return AIContentDetector()
