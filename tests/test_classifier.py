from twsort.config import TwsortCfg
from twsort.tailwind.classifier import Callee, is_tailwind_attribute, is_tailwind_call


def test_default_attributes_always_match():
    cfg = TwsortCfg()
    assert is_tailwind_attribute("class", cfg)
    assert is_tailwind_attribute("className", cfg)


def test_other_attributes_need_configuration():
    assert not is_tailwind_attribute("myClassProp", TwsortCfg())
    assert is_tailwind_attribute("myClassProp", TwsortCfg(tailwind_attributes=["myClassProp"]))


def test_attribute_comparison_is_case_sensitive():
    cfg = TwsortCfg(tailwind_attributes=["myClassProp"])
    assert not is_tailwind_attribute("classname", cfg)
    assert not is_tailwind_attribute("Class", cfg)
    assert not is_tailwind_attribute("myclassprop", cfg)


def test_empty_attribute_list_adds_nothing():
    assert not is_tailwind_attribute("tw", TwsortCfg(tailwind_attributes=[]))


def test_call_without_configured_functions_is_never_tailwind():
    assert not is_tailwind_call(Callee("identifier", "clsx"), TwsortCfg())


def test_call_matches_bare_identifier_only():
    cfg = TwsortCfg(tailwind_functions=["clsx", "cn"])
    assert is_tailwind_call(Callee("identifier", "clsx"), cfg)
    assert is_tailwind_call(Callee("identifier", "cn"), cfg)
    assert not is_tailwind_call(Callee("identifier", "cva"), cfg)
    assert not is_tailwind_call(Callee("member", "clsx"), cfg)
    assert not is_tailwind_call(Callee("computed", "clsx"), cfg)


def test_classification_is_deterministic():
    cfg = TwsortCfg(tailwind_attributes=["tw"], tailwind_functions=["cn"])
    results = {(is_tailwind_attribute("tw", cfg), is_tailwind_call(Callee("identifier", "cn"), cfg)) for _ in range(5)}
    assert results == {(True, True)}
