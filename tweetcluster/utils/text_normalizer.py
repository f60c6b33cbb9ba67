# utils/text_normalizer.py
import html

def normalize_html_text(text: str) -> str:
    # search API는 text를 HTML escape해서 준다 (&amp; -> &, &lt; -> < 등)
    if not text:
        return text
    return html.unescape(text)


def tokenize(text: str) -> list[str]:
    """공백 기준으로만 자른다. 대소문자/문장부호/어간 처리는 하지 않는다"""
    if not text:
        return []
    return text.split()
