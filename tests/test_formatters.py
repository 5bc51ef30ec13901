from hoverlocator.dom_tree import DomNode
from hoverlocator.formatters import format_css_scheme, format_role_scheme, format_xpath_scheme


def _on_page(tag: str, attributes: dict[str, str] | None = None, text: str = "") -> DomNode:
    html = DomNode("html")
    body = html.append(DomNode("body"))
    return body.append(DomNode(tag, attributes or {}, text=text))


def test_css_scheme_prefers_stable_attributes() -> None:
    assert format_css_scheme(_on_page("button", {"id": "submit-btn"}, "Submit")) == "cy.get('#submit-btn')"
    assert format_css_scheme(_on_page("div", {"data-cy": "login form"})) == "cy.get('[data-cy=\"login form\"]')"
    assert format_css_scheme(_on_page("input", {"name": "email"})) == "cy.get('[name=\"email\"]')"


def test_css_scheme_text_rule_precedes_single_class_rule() -> None:
    assert format_css_scheme(_on_page("a", {"class": "nav-link"}, "Home")) == "cy.contains('a', 'Home')"
    assert format_css_scheme(_on_page("a", {"class": "nav-link active"}, "Home")) == "cy.contains('a', 'Home')"
    assert format_css_scheme(_on_page("button", {}, "  Save\n changes ")) == "cy.contains('button', 'Save changes')"


def test_css_scheme_single_class_rule() -> None:
    assert format_css_scheme(_on_page("span", {"class": "nav-link"}, "Home")) == "cy.get('.nav-link')"
    assert format_css_scheme(_on_page("a", {"class": " nav-link "})) == "cy.get('.nav-link')"
    assert format_css_scheme(_on_page("span", {"class": "md:flex"})) == r"cy.get('.md\\:flex')"


def test_css_scheme_falls_back_to_path() -> None:
    assert format_css_scheme(_on_page("div", {"class": "card shadow"})) == "cy.get('div:nth-child(1)')"
    assert format_css_scheme(_on_page("div", {"class": "card card"})) == "cy.get('div:nth-child(1)')"
    assert format_css_scheme(_on_page("button", {}, "   ")) == "cy.get('button:nth-child(1)')"


def test_css_scheme_escapes_quotes_and_backslashes() -> None:
    assert format_css_scheme(_on_page("button", {}, "Don't go")) == r"cy.contains('button', 'Don\'t go')"
    node = _on_page("div", {"data-cy": 'say "hi"'})
    assert format_css_scheme(node) == r"""cy.get('[data-cy="say \\"hi\\""]')"""


def test_role_scheme_id_takes_absolute_precedence() -> None:
    node = _on_page("button", {"id": "go", "role": "button", "data-cy": "go"}, "Go")
    assert format_role_scheme(node) == "page.locator('#go')"


def test_role_scheme_uses_role_with_and_without_name() -> None:
    dialog = _on_page("div", {"role": "dialog"}, " Confirm   delete ")
    assert format_role_scheme(dialog) == "page.getByRole('dialog', { name: 'Confirm delete' })"
    nav = _on_page("div", {"role": "navigation"})
    assert format_role_scheme(nav) == "page.getByRole('navigation')"


def test_role_scheme_text_and_path_fallbacks() -> None:
    assert format_role_scheme(_on_page("a", {"class": "nav-link"}, "Home")) == "page.getByText('Home')"
    assert format_role_scheme(_on_page("button", {}, "It's\n done")) == r"page.getByText('It\'s done')"
    # Test attributes are not consulted by this scheme.
    assert format_role_scheme(_on_page("div", {"data-cy": "panel"})) == "page.locator('div:nth-child(1)')"
    assert format_role_scheme(_on_page("span", {"class": "badge"})) == "page.locator('span:nth-child(1)')"


def test_xpath_scheme_wraps_attribute_match_in_css_selector() -> None:
    assert (
        format_xpath_scheme(_on_page("button", {"id": "submit-btn"}))
        == 'driver.find_element(By.CSS_SELECTOR, "#submit-btn")'
    )
    assert (
        format_xpath_scheme(_on_page("form", {"data-test": "checkout"}))
        == "driver.find_element(By.CSS_SELECTOR, \"[data-test='checkout']\")"
    )
    assert (
        format_xpath_scheme(_on_page("input", {"name": "q"}))
        == "driver.find_element(By.CSS_SELECTOR, \"[name='q']\")"
    )
    assert (
        format_xpath_scheme(_on_page("div", {"id": "1st"}))
        == "driver.find_element(By.CSS_SELECTOR, \"[id='1st']\")"
    )
    assert (
        format_xpath_scheme(_on_page("div", {"data-cy": "it's"}))
        == r"""driver.find_element(By.CSS_SELECTOR, "[data-cy='it\\'s']")"""
    )


def test_xpath_scheme_falls_back_to_xpath_path() -> None:
    html = DomNode("html")
    body = html.append(DomNode("body"))
    parent = body.append(DomNode("div"))
    parent.append(DomNode("div"))
    parent.append(DomNode("span"))
    target = parent.append(DomNode("div", {"class": "only"}, text="Text"))

    assert format_xpath_scheme(target) == 'driver.find_element(By.XPATH, "/html/body/div/div[2]")'

    parent.attributes["id"] = "a'b\"c"
    assert (
        format_xpath_scheme(target)
        == r"""driver.find_element(By.XPATH, "//*[@id=concat('a', \"'\", 'b\"c')]/div[2]")"""
    )


def test_custom_finder_names() -> None:
    node = _on_page("button", {"id": "go"})
    assert format_role_scheme(node, finder="frame") == "frame.locator('#go')"
    assert format_xpath_scheme(node, finder="self.driver") == 'self.driver.find_element(By.CSS_SELECTOR, "#go")'
