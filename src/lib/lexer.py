"""
Custom Pygments lexer for Backlog wiki syntax

Highlights converted output when it is previewed in the terminal.

Token types:
- Generic.Heading: "* Heading" lines
- Keyword: list markers ("-", "--", "+")
- Keyword.Declaration: {code}, {/code}, {quote}, {/quote}
- String: code block content, link text
- Generic.Strong / Generic.Emph / Generic.Deleted: ''bold'', '''italic''', %%strike%%
- Name.Attribute: link targets
- Name.Decorator: table header suffix |h
- Name.Entity: &br;
"""

from pygments.lexer import RegexLexer, bygroups
from pygments.token import (
    Text,
    Punctuation,
    Name,
    String,
    Keyword,
    Generic,
)


class BacklogLexer(RegexLexer):
    """
    Lexer for Backlog wiki markup

    Example:
        ** Setup
        - ''Install'' the [[package>https://pypi.org]]

    Tokens:
        ** Setup → Generic.Heading
        - → Keyword
        ''Install'' → Generic.Strong
        https://pypi.org → Name.Attribute
    """

    name = 'Backlog'
    aliases = ['backlog', 'backlog-wiki']
    filenames = ['*.backlog']

    tokens = {
        'root': [
            # Code block: everything up to {/code} is literal
            (r'^\{code\}\n', Keyword.Declaration, 'code'),

            (r'^\{/?quote\}$', Keyword.Declaration),

            (r'^\*+\s.*$', Generic.Heading),

            # Bullet and numbered list markers
            (r'^(-+|\+)(\s)', bygroups(Keyword, Text)),

            # [[text>url]] and [[url]]
            (r'(\[\[)([^\]>\n]+)(>)([^\]\n]+)(\]\])',
             bygroups(Punctuation, String, Punctuation, Name.Attribute, Punctuation)),
            (r'(\[\[)([^\]\n]+)(\]\])', bygroups(Punctuation, Name.Attribute, Punctuation)),

            # Italic before bold: ''' would otherwise open a bold span
            (r"'''.+?'''", Generic.Emph),
            (r"''.+?''", Generic.Strong),
            (r'%%.+?%%', Generic.Deleted),

            (r'\|h$', Name.Decorator),
            (r'\|', Punctuation),

            (r'&br;', Name.Entity),

            (r"[^\n*\-+\['%|&{]+", Text),
            (r'\n', Text),
            (r'.', Text),
        ],

        'code': [
            (r'^\{/code\}$', Keyword.Declaration, '#pop'),
            (r'.*\n', String),
        ],
    }


def get_lexer() -> BacklogLexer:
    return BacklogLexer()
