# blogsphere/utils/text_utils.py


def truncate_text(text: str, limit: int) -> str:
    """limit 글자를 넘으면 잘라내고 '...' 를 붙입니다."""
    if len(text) <= limit:
        return text
    return text[:limit] + '...'
