"""
Turns flat extracted text (as recovered from PDF pages) into Markdown.

Lines are classified with a fixed, ordered set of heading rules; the first
rule that matches wins. The rules are heuristics tuned on real documents and
overlap on purpose. Their order and thresholds decide the outcome on
ambiguous lines, so change them with care.
"""

import re
from dataclasses import dataclass

CJK = '一-鿿'

MARKDOWN_HEADING = re.compile(r'^#{1,6}\s')
ALL_CAPS = re.compile(r'^[A-Z\s0-9.\-():]+$')
NUMBERED_HEADING = re.compile(r'^[0-9]+(\.[0-9]+)*[.)]?\s*[A-Za-z' + CJK + ']')
SECTION_KEYWORD = re.compile(
    r'^(Chapter|Section|Part|Appendix|Introduction|Conclusion|Summary|Overview|'
    r'Abstract|Background|Method|Result|Discussion|Example|Sample|Demo|Tutorial|'
    r'Guide|Manual|Reference|API|Usage|Installation|Configuration|Setup|'
    r'第.*章|第.*节|第.*部分|章节|摘要|总结|概述|介绍|结论|背景|方法|结果|讨论|'
    r'示例|样例|演示|教程|指南|手册|参考|用法|安装|配置|设置|前言|序言|目录|附录|'
    r'说明|描述|定义|原理|实现|应用|测试|验证|分析|评估|比较|优化|改进|扩展|未来|'
    r'展望|致谢|参考文献)\s+',
    re.IGNORECASE,
)
TITLE_FORMAT = re.compile(r'^[A-Z' + CJK + r'][A-Za-z' + CJK + r'\s0-9\-.:]+$')
MIXED_CASE = re.compile(
    r'^[A-Z' + CJK + '][a-z' + CJK + r']+(?:\s+[A-Za-z' + CJK + '][a-z' + CJK + ']*)*$'
)
LEADING_ARTICLE = re.compile(r'^(The|A|An|This|That|These|Those|这|那|这些|那些|本|该)\s')
SHORT_LINE = re.compile(r'^[A-Za-z' + CJK + r'][A-Za-z' + CJK + r'\s0-9\-]*$')
COLON_PHRASE = re.compile(r'^[A-Za-z' + CJK + r'][A-Za-z' + CJK + r'\s0-9\-]*:$')
CHINESE_ENUMERATION = re.compile(r'^[一二三四五六七八九十百千万]+[、．.]\s*[' + CJK + ']')
CHINESE_PARENTHESISED = re.compile(r'^[（(][一二三四五六七八九十0-9]+[）)]\s*[' + CJK + ']')

NUMBERED_ITEM = re.compile(r'^[0-9]+[.)]\s')
BULLET_ITEM = re.compile(r'^[\-*•]\s')


@dataclass(frozen=True)
class LineContext:
    """A trimmed line together with its trimmed neighbours."""

    line: str
    previous: str
    following: str
    index: int
    total: int

    @property
    def is_first(self):
        return self.index == 0

    @property
    def is_last(self):
        return self.index == self.total - 1


def is_all_caps_heading(ctx):
    line = ctx.line
    if not (ALL_CAPS.match(line) and 2 < len(line) < 100 and '://' not in line):
        return False
    return (not ctx.previous or not ctx.following
            or ctx.is_first or ctx.is_last
            or len(line) < 30)


def is_numbered_heading(ctx):
    return bool(NUMBERED_HEADING.match(ctx.line)) and len(ctx.line) < 120


def is_section_keyword(ctx):
    return bool(SECTION_KEYWORD.match(ctx.line)) and len(ctx.line) < 100


def is_title_format(ctx):
    line = ctx.line
    if not (TITLE_FORMAT.match(line) and 3 < len(line) < 80):
        return False
    if line.endswith('.') or '://' in line or len(line.split()) > 12:
        return False
    return (not ctx.previous or not ctx.following
            or ctx.is_first or ctx.is_last
            or len(line) < 40)


def is_mixed_case_title(ctx):
    line = ctx.line
    if not (MIXED_CASE.match(line) and 4 < len(line) < 70):
        return False
    if line.endswith('.') or LEADING_ARTICLE.match(line):
        return False
    return not ctx.following or ctx.is_last


def is_short_isolated_line(ctx):
    line = ctx.line
    if not (2 < len(line) < 25 and SHORT_LINE.match(line)):
        return False
    if line.endswith('.') or '://' in line:
        return False
    return (not ctx.following
            and (not ctx.previous or len(ctx.previous) > len(line) * 2))


def is_colon_heading(ctx):
    line = ctx.line
    return (line.endswith(':') and 3 < len(line) < 60
            and bool(COLON_PHRASE.match(line)))


def is_chinese_enumeration(ctx):
    return bool(CHINESE_ENUMERATION.match(ctx.line)) and len(ctx.line) < 80


def is_chinese_parenthesised(ctx):
    return bool(CHINESE_PARENTHESISED.match(ctx.line)) and len(ctx.line) < 80


# Evaluated top to bottom, first match wins.
HEADING_RULES = [
    ('all_caps', is_all_caps_heading),
    ('numbered', is_numbered_heading),
    ('section_keyword', is_section_keyword),
    ('title_format', is_title_format),
    ('mixed_case', is_mixed_case_title),
    ('short_isolated', is_short_isolated_line),
    ('colon', is_colon_heading),
    ('chinese_enumeration', is_chinese_enumeration),
    ('chinese_parenthesised', is_chinese_parenthesised),
]


def match_heading_rule(ctx):
    """Returns the name of the first heading rule matching the line, or None."""
    for name, rule in HEADING_RULES:
        if rule(ctx):
            return name
    return None


def classify_line(ctx):
    """
    Classifies a non-blank line.

    Returns:
        str: One of ``'markdown_heading'`` (already a heading, kept as is),
        ``'heading'``, ``'numbered'``, ``'bullet'`` or ``'paragraph'``
    """
    if MARKDOWN_HEADING.match(ctx.line):
        return 'markdown_heading'
    if match_heading_rule(ctx):
        return 'heading'
    if NUMBERED_ITEM.match(ctx.line):
        return 'numbered'
    if BULLET_ITEM.match(ctx.line):
        return 'bullet'
    return 'paragraph'


def structure_text(text, newline='\n'):
    """
    Converts flat text to markdown with headings, lists and paragraphs.

    Args:
        text: Extracted text, lines separated by ``newline``
        newline: Line delimiter of the input, also used for the output

    Returns:
        Markdown string
    """
    lines = text.split(newline)
    total = len(lines)
    parts = []

    for index, raw in enumerate(lines):
        line = raw.strip()
        if not line:
            parts.append(newline)
            continue

        ctx = LineContext(
            line=line,
            previous=lines[index - 1].strip() if index > 0 else '',
            following=lines[index + 1].strip() if index + 1 < total else '',
            index=index,
            total=total,
        )
        kind = classify_line(ctx)
        if kind == 'markdown_heading':
            parts.append(line + newline * 2)
        elif kind == 'heading':
            parts.append('## ' + line + newline * 2)
        elif kind == 'numbered':
            parts.append(line + newline)
        elif kind == 'bullet':
            parts.append('- ' + line[2:] + newline)
        else:
            parts.append(line + newline * 2)

    return ''.join(parts).strip()
