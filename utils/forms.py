"""
Form Module - Converts the portfolio form submission into a record
"""

PERSONAL_FIELDS = ('fullName', 'email', 'phone', 'address', 'linkedin', 'github', 'website')

# Repeated sections are posted as parallel lists, e.g. experience_title[]
SECTION_FIELDS = {
    'experience': ('title', 'company', 'startDate', 'endDate', 'description'),
    'education': ('degree', 'institution', 'year'),
    'certificates': ('name', 'url', 'filename'),
    'projects': ('name', 'link', 'description'),
}


def empty_portfolio():
    """Blank record used to render a new form"""
    return {
        'personalInfo': {field: '' for field in PERSONAL_FIELDS},
        'summary': '',
        'experience': [],
        'education': [],
        'skills': [],
        'certificates': [],
        'projects': []
    }


def collect_rows(form, section):
    """Zip the parallel field lists of a section into entries, dropping blank rows"""
    fields = SECTION_FIELDS[section]
    columns = [form.getlist(f'{section}_{field}[]') for field in fields]
    row_count = max((len(column) for column in columns), default=0)

    rows = []
    for index in range(row_count):
        entry = {
            field: (column[index].strip() if index < len(column) else '')
            for field, column in zip(fields, columns)
        }
        if any(entry.values()):
            rows.append(entry)
    return rows


def collect_skills(form):
    """Existing skills plus comma-separated new ones, de-duplicated in order"""
    skills = [s.strip() for s in form.getlist('skills[]')]
    skills += [s.strip() for s in form.get('new_skills', '').split(',')]

    unique = []
    for skill in skills:
        if skill and skill not in unique:
            unique.append(skill)
    return unique


def parse_portfolio_form(form):
    """
    Build a portfolio record from submitted form data

    Args:
        form (MultiDict): request.form

    Returns:
        dict: Record shaped like the JSON API payload (without id)
    """
    portfolio = {
        'personalInfo': {
            field: form.get(f'personalInfo_{field}', '').strip()
            for field in PERSONAL_FIELDS
        },
        'summary': form.get('summary', '').strip(),
        'skills': collect_skills(form),
    }
    for section in SECTION_FIELDS:
        portfolio[section] = collect_rows(form, section)
    return portfolio


__all__ = [
    'PERSONAL_FIELDS',
    'SECTION_FIELDS',
    'empty_portfolio',
    'collect_rows',
    'collect_skills',
    'parse_portfolio_form'
]
