from wireframe_drafter.extractor import ComponentExtractor, extract_mentions
from wireframe_drafter.models.mention import ComponentType


def types_of(mentions):
    return [mention.component_type for mention in mentions]


def test_dashboard_description_mentions():
    mentions = extract_mentions("Admin dashboard with sidebar navigation, charts, and a data table")

    assert types_of(mentions) == [
        ComponentType.header,
        ComponentType.sidebar,
        ComponentType.table,
        ComponentType.chart,
    ]
    header = mentions[0]
    assert header.content == "Admin Header"
    assert header.anchor_position == "top"
    assert header.importance == 9


def test_mentions_sorted_by_importance_after_dedup():
    mentions = extract_mentions("Online shop with product grid and shopping cart and filters")

    # table is scanned before product-card but ranks below it
    assert types_of(mentions) == [
        ComponentType.product_card,
        ComponentType.table,
        ComponentType.shopping_cart,
        ComponentType.filter,
    ]
    assert [mention.importance for mention in mentions] == [8, 7, 7, 6]


def test_repeated_keyword_yields_single_mention():
    mentions = extract_mentions("header header header")

    assert types_of(mentions) == [ComponentType.header]


def test_first_scanned_keyword_wins_for_a_type():
    # "messages" maps to text with importance 8, but "content" is scanned first
    mentions = extract_mentions("Main content next to the messages")

    texts = [mention for mention in mentions if mention.component_type == ComponentType.text]
    assert len(texts) == 1
    assert texts[0].importance == 7


def test_keywords_match_whole_words_only():
    assert extract_mentions("The subheaders are great") == []


def test_matching_ignores_case():
    mentions = extract_mentions("A big HERO up front")

    assert types_of(mentions) == [ComponentType.hero]


def test_context_window_keeps_original_case():
    description = "x" * 40 + " Sticky Header " + "y" * 40
    (mention,) = extract_mentions(description)

    assert mention.context_words == ("x" * 22, "Sticky", "Header", "y" * 29)


def test_content_labels_follow_context():
    extractor = ComponentExtractor()

    assert extractor.content_for(ComponentType.header, ("Our", "company", "header")) == "Company Header"
    assert extractor.content_for(ComponentType.header, ("plain",)) == "Main Header"
    assert extractor.content_for(ComponentType.hero, ("hero", "for", "AI")) == "AI-Powered Solution"
    assert extractor.content_for(ComponentType.hero, ("saas", "hero")) == "SaaS Platform"
    assert extractor.content_for(ComponentType.button, ("Register", "button")) == "Sign Up"
    assert extractor.content_for(ComponentType.button, ("learn", "more")) == "Learn More"
    assert extractor.content_for(ComponentType.button, ()) == "Get Started"
    assert extractor.content_for(ComponentType.form, ("login", "form")) == "Login Form"
    assert extractor.content_for(ComponentType.search, ("search", "products")) == "Search products..."
    assert extractor.content_for(ComponentType.search, ("search",)) == "Search..."


def test_content_defaults_to_capitalized_type():
    extractor = ComponentExtractor()

    assert extractor.content_for(ComponentType.table, ("data", "table")) == "Table"
    assert extractor.content_for(ComponentType.product_card, ()) == "Product-card"


def test_contact_form_content():
    mentions = extract_mentions("Contact form with name, email, and message fields, plus a submit button")
    by_type = {mention.component_type: mention for mention in mentions}

    assert by_type[ComponentType.form].content == "Contact Form"
    assert by_type[ComponentType.button].content == "Get Started"
