# app/services/seed.py
# 기본 문제 세트. 서버 시작 시 그리고 POST /seed 로 넣는다.
import logging
from typing import List

from app.schemas.question import QuestionDraft
from app.services.question_store import QuestionStore

logger = logging.getLogger(__name__)

BASELINE_QUESTIONS: List[QuestionDraft] = [
    QuestionDraft(
        question="Two Sum",
        description="Given an array of integers, return indices of the two numbers such that they add up to a specific target.",
        constraints="The array has at most 10^4 elements.",
        hint="Try using a hash map to store the indices.",
        solution="You can use a hash map to check if the complement of the current element exists.",
        code_solution=(
            "def two_sum(nums, target):\n"
            "    seen = {}\n"
            "    for i, n in enumerate(nums):\n"
            "        if target - n in seen:\n"
            "            return [seen[target - n], i]\n"
            "        seen[n] = i\n"
        ),
        category="array",
        trivia="Two Sum is problem #1 on LeetCode and one of the most asked warm-up questions.",
    ),
    QuestionDraft(
        question="Reverse Linked List",
        description="Reverse a singly linked list.",
        constraints="The list has at most 5000 nodes.",
        hint="Consider using a three-pointer approach.",
        solution="You can reverse the list by changing the next pointers of the nodes.",
        code_solution=(
            "def reverse_list(head):\n"
            "    prev = None\n"
            "    curr = head\n"
            "    while curr is not None:\n"
            "        curr.next, prev, curr = prev, curr, curr.next\n"
            "    return prev\n"
        ),
        category="linked list",
        trivia="Linked lists were developed in 1955-1956 by Allen Newell, Cliff Shaw and Herbert Simon.",
    ),
    QuestionDraft(
        question="Longest Substring Without Repeating Characters",
        description="Given a string, find the length of the longest substring without repeating characters.",
        constraints="The string has at most 10^5 characters.",
        hint="Use a sliding window approach.",
        solution="A sliding window with a hash map of last-seen positions keeps track of unique characters.",
        code_solution=(
            "def length_of_longest_substring(s):\n"
            "    last = {}\n"
            "    left = best = 0\n"
            "    for right, ch in enumerate(s):\n"
            "        if ch in last:\n"
            "            left = max(left, last[ch] + 1)\n"
            "        last[ch] = right\n"
            "        best = max(best, right - left + 1)\n"
            "    return best\n"
        ),
        category="string",
        trivia="The sliding window technique also underlies TCP flow control.",
    ),
    QuestionDraft(
        question="Climbing Stairs",
        description=(
            "You are climbing a staircase. It takes `n` steps to reach the top. Each time you can "
            "either climb 1 or 2 steps. In how many distinct ways can you climb to the top?"
        ),
        constraints="1 <= n <= 45",
        hint="Use dynamic programming to build up the solution.",
        solution="The problem can be solved using a dynamic programming approach similar to the Fibonacci sequence.",
        code_solution=(
            "def climb_stairs(n):\n"
            "    if n <= 2:\n"
            "        return n\n"
            "    a, b = 1, 2\n"
            "    for _ in range(3, n + 1):\n"
            "        a, b = b, a + b\n"
            "    return b\n"
        ),
        category="dynamic programming",
        trivia="Richard Bellman coined the term 'dynamic programming' in the 1950s.",
    ),
    QuestionDraft(
        question="Number of Islands",
        description=(
            "Given a 2D binary grid map of `1`s (land) and `0`s (water), count the number of islands. "
            "An island is surrounded by water and is formed by connecting adjacent lands horizontally or vertically."
        ),
        constraints="The grid is m x n, where 1 <= m, n <= 50.",
        hint="Use Depth-First Search (DFS) or Breadth-First Search (BFS) to traverse the grid.",
        solution="A DFS or BFS approach can be used to explore each island and mark visited land cells.",
        code_solution=(
            "def num_islands(grid):\n"
            "    rows, cols = len(grid), len(grid[0]) if grid else 0\n"
            "\n"
            "    def sink(i, j):\n"
            "        if i < 0 or i >= rows or j < 0 or j >= cols or grid[i][j] != '1':\n"
            "            return\n"
            "        grid[i][j] = '0'\n"
            "        sink(i - 1, j); sink(i + 1, j); sink(i, j - 1); sink(i, j + 1)\n"
            "\n"
            "    count = 0\n"
            "    for i in range(rows):\n"
            "        for j in range(cols):\n"
            "            if grid[i][j] == '1':\n"
            "                sink(i, j)\n"
            "                count += 1\n"
            "    return count\n"
        ),
        category="graph",
        trivia="Counting islands is the connected-components problem, first studied by Euler with the bridges of Konigsberg.",
    ),
]


def seed_questions(store: QuestionStore, questions: List[QuestionDraft] = BASELINE_QUESTIONS) -> int:
    """
    저장되지 않은 제목만 shown=false 로 추가. 여러 번 불러도 중복으로 쌓이지 않는다.
    반환값: 추가한 개수
    """
    existing = set(store.all_titles())
    inserted = 0
    for q in questions:
        if q.question in existing:
            continue
        store.insert(q, shown=False)
        existing.add(q.question)
        inserted += 1

    logger.info("[SEED] inserted %d baseline question(s)", inserted)
    return inserted
