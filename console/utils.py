def apply_style(text: str, style: str):
    return f"[{style}]{text}[/{style}]"

def header(text):
    return apply_style(text, "rule.text")

def success(text):
    return apply_style(text, "success")

def error(text):
    return apply_style(text, "error.content")

def warning(text):
    return apply_style(text, "warning.content")

def info(text):
    return apply_style(text, "info.content")

def emphasis(text):
    return apply_style(text, "magenta")

def subtle(text):
    return apply_style(text, "med_grey")
