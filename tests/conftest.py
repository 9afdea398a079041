"""Shared fixtures for converter tests."""

import pytest


DEMO_SCRIPT = (
    "String username = **user_info;\n"
    "List<Integer> scores = **score_list;\n"
    "System.out.println(username);"
)

RUN_CLASS = """\
public class Demo {
    /**
     * Sample run method
     * @param count loop count
     */
    public static void run(
       int count, // 10
        String message //
    ) {
        // method logic
        System.out.println("count: " + count);
        System.out.println(message);
    }
}
"""


@pytest.fixture
def demo_script():
    """Two bindings followed by one line of business logic."""
    return DEMO_SCRIPT


@pytest.fixture
def run_class():
    """A hand-written class with a commented public static run method."""
    return RUN_CLASS
