from typing import Tuple

from models.errors import QuestionBankError
from models.question import (
    CodingQuestion,
    CodingTest,
    Entity,
    EvaluationCase,
    EvaluationQuestion,
    InstructionFollowingQuestion,
    MultipleChoiceQuestion,
    NerTaggingQuestion,
    Question,
    ReadingComprehensionQuestion,
    ShortAnswerQuestion,
    SubQuestion,
    Subtask,
    WordLimit,
    WritingQuestion,
)


def _mc(id: int, category: str, prompt: str, options, correct, explanation: str) -> MultipleChoiceQuestion:
    return MultipleChoiceQuestion(
        id=id, category=category, prompt=prompt,
        options=tuple(options), correct=correct, explanation=explanation,
    )


# --- Questions 1-30: multiple choice ---
_MULTIPLE_CHOICE_BLOCK = (
    _mc(1, "Data Structures", "What is the time complexity of searching for an element in a balanced Binary Search Tree?",
        ["O(1)", "O(log n)", "O(n)", "O(n log n)"], 1,
        "In a balanced BST, the height is log n, and searching requires traversing from root to a leaf in the worst case, resulting in O(log n) time complexity."),
    _mc(2, "Algorithms", "Which sorting algorithm has the best average-case time complexity?",
        ["Bubble Sort", "Insertion Sort", "Merge Sort", "Selection Sort"], 2,
        "Merge Sort has O(n log n) average-case time complexity, which is optimal for comparison-based sorting algorithms."),
    _mc(3, "Python", "What will be the output of: print(type([]) == list)?",
        ["True", "False", "TypeError", "None"], 0,
        "The type() function returns the class type of an object. [] is a list, so type([]) returns <class 'list'>, which equals list."),
    _mc(4, "JavaScript", "What does the '===' operator do in JavaScript?",
        ["Checks value equality only", "Checks type equality only", "Checks both value and type equality", "Assigns a value"], 2,
        "The strict equality operator (===) checks both the value and the type, while == only checks value after type coercion."),
    _mc(5, "SQL", "Which SQL clause is used to filter rows after grouping?",
        ["WHERE", "HAVING", "FILTER", "GROUP BY"], 1,
        "HAVING is used to filter groups after GROUP BY, while WHERE filters rows before grouping."),
    _mc(6, "Database", "What does ACID stand for in database transactions?",
        ["Atomic, Consistent, Isolated, Durable", "Active, Complete, Isolated, Dynamic",
         "Atomic, Complete, Independent, Durable", "Active, Consistent, Independent, Dynamic"], 0,
        "ACID properties ensure reliable database transactions: Atomicity (all or nothing), Consistency (valid state), Isolation (concurrent independence), and Durability (permanent once committed)."),
    _mc(7, "Object-Oriented Programming", "Which OOP principle allows a class to have multiple methods with the same name but different parameters?",
        ["Encapsulation", "Inheritance", "Polymorphism", "Abstraction"], 2,
        "Polymorphism allows method overloading (same name, different parameters) and method overriding (redefining inherited methods)."),
    _mc(8, "Data Structures", "Which data structure uses LIFO (Last In First Out) principle?",
        ["Queue", "Stack", "Linked List", "Tree"], 1,
        "A Stack follows LIFO principle where the last element added is the first one to be removed. Queues use FIFO (First In First Out)."),
    _mc(9, "Algorithms", "What is the space complexity of the recursive Fibonacci algorithm?",
        ["O(1)", "O(log n)", "O(n)", "O(n^2)"], 2,
        "The recursive Fibonacci uses O(n) space due to the call stack depth, even though it doesn't use extra data structures."),
    _mc(10, "Web Development", "What is the purpose of the 'async' attribute in a script tag?",
        ["Makes the script run synchronously", "Downloads script asynchronously without blocking HTML parsing",
         "Delays script execution until page load", "Encrypts the script"], 1,
        "The async attribute allows the browser to download the script asynchronously while continuing to parse HTML, improving page load performance."),
    _mc(11, "Operating Systems", "What is a deadlock in operating systems?",
        ["When a process completes execution", "When two or more processes wait indefinitely for resources held by each other",
         "When a process crashes", "When memory is full"], 1,
        "A deadlock occurs when processes are blocked because each is waiting for a resource that another process holds, creating a circular wait."),
    _mc(12, "Networks", "Which HTTP status code indicates a successful request?",
        ["404", "500", "200", "301"], 2,
        "Status code 200 indicates OK - the request succeeded. 404 is Not Found, 500 is Server Error, and 301 is Moved Permanently."),
    _mc(13, "Python", "What is the output of: print(3 * '7')?",
        ["21", "777", "Error", "37"], 1,
        "In Python, multiplying a string by an integer repeats the string that many times. So 3 * '7' results in '777'."),
    _mc(14, "Data Structures", "What is the average time complexity for insertion in a hash table?",
        ["O(1)", "O(log n)", "O(n)", "O(n^2)"], 0,
        "Hash tables provide O(1) average-case time complexity for insertion, deletion, and lookup through direct indexing via hash functions."),
    _mc(15, "JavaScript", "What will 'console.log(typeof null)' output?",
        ["null", "undefined", "object", "number"], 2,
        "This is a well-known JavaScript quirk. typeof null returns 'object' due to a bug in the original JavaScript implementation that was never fixed for backwards compatibility."),
    _mc(16, "SQL", "Which SQL JOIN returns all rows from both tables, matching rows where available?",
        ["INNER JOIN", "LEFT JOIN", "RIGHT JOIN", "FULL OUTER JOIN"], 3,
        "FULL OUTER JOIN returns all rows from both tables, with NULL values where matches don't exist. INNER JOIN only returns matching rows."),
    _mc(17, "Algorithms", "Which algorithm is commonly used to find the shortest path in a weighted graph?",
        ["Depth-First Search", "Breadth-First Search", "Dijkstra's Algorithm", "Binary Search"], 2,
        "Dijkstra's Algorithm finds the shortest path from a source to all vertices in a weighted graph with non-negative weights."),
    _mc(18, "Object-Oriented Programming", "What does encapsulation achieve in OOP?",
        ["Code reusability", "Data hiding and bundling", "Multiple inheritance", "Runtime binding"], 1,
        "Encapsulation bundles data and methods together while hiding internal implementation details, protecting data from external interference."),
    _mc(19, "Git/Version Control", "What Git command is used to combine changes from one branch into another?",
        ["git combine", "git merge", "git join", "git unite"], 1,
        "git merge integrates changes from one branch into the current branch, preserving the commit history of both branches."),
    _mc(20, "Web Development", "What does REST stand for in RESTful APIs?",
        ["Remote Execution State Transfer", "Representational State Transfer",
         "Reliable Execution and State Transmission", "Resource Encoded State Transfer"], 1,
        "REST (Representational State Transfer) is an architectural style for distributed systems using stateless communication and standard HTTP methods."),
    _mc(21, "Operating Systems", "What is virtual memory?",
        ["Memory that doesn't physically exist", "A memory management technique that uses disk space as an extension of RAM",
         "Memory used only by virtual machines", "Cached memory"], 1,
        "Virtual memory allows systems to use disk space as extended RAM, enabling programs to use more memory than physically available through paging."),
    _mc(22, "Python", "Which Python data structure is ordered, mutable, and allows duplicate elements?",
        ["Set", "Dictionary", "List", "Tuple"], 2,
        "Lists are ordered, mutable (changeable), and allow duplicates. Sets don't allow duplicates, tuples are immutable, and dictionaries are key-value pairs."),
    _mc(23, "Database", "What is the purpose of indexing in databases?",
        ["To encrypt data", "To speed up data retrieval operations", "To delete old records", "To backup data"], 1,
        "Indexes create data structures that improve the speed of data retrieval operations, similar to an index in a book helping you find information quickly."),
    _mc(24, "Machine Learning Basics", "What is the difference between supervised and unsupervised learning?",
        ["Supervised uses labeled data, unsupervised uses unlabeled data", "Supervised is faster than unsupervised",
         "Supervised uses more memory", "There is no difference"], 0,
        "Supervised learning trains on labeled data (input-output pairs), while unsupervised learning finds patterns in unlabeled data without predefined outputs."),
    _mc(25, "Algorithms", "What is the worst-case time complexity of QuickSort?",
        ["O(n)", "O(n log n)", "O(n^2)", "O(log n)"], 2,
        "QuickSort has O(n^2) worst-case complexity when the pivot selection is poor (e.g., already sorted array with first element as pivot), though average case is O(n log n)."),
    _mc(26, "JavaScript", "What is a closure in JavaScript?",
        ["A function that closes the browser", "A function that has access to variables from its outer scope",
         "A way to end a loop", "A syntax error"], 1,
        "A closure is a function that retains access to variables from its outer (enclosing) scope even after the outer function has finished executing."),
    _mc(27, "Networks", "What is the difference between TCP and UDP?",
        ["TCP is faster but less reliable, UDP is slower but reliable",
         "TCP is connection-oriented and reliable, UDP is connectionless and faster",
         "They are the same protocol", "UDP only works on local networks"], 1,
        "TCP is connection-oriented, reliable, and ensures ordered delivery. UDP is connectionless, faster, but doesn't guarantee delivery or order."),
    _mc(28, "Security", "What does HTTPS provide that HTTP does not?",
        ["Faster connection", "Encrypted communication", "Better SEO only", "More bandwidth"], 1,
        "HTTPS (HTTP Secure) encrypts data between client and server using SSL/TLS, protecting against eavesdropping and man-in-the-middle attacks."),
    _mc(29, "System Design", "What is the purpose of load balancing?",
        ["To increase storage capacity", "To distribute network traffic across multiple servers", "To encrypt data", "To backup data"], 1,
        "Load balancing distributes incoming network traffic across multiple servers to ensure no single server is overwhelmed, improving availability and performance."),
    _mc(30, "Data Structures", "Which data structure is best suited for implementing a priority queue?",
        ["Array", "Linked List", "Heap", "Stack"], 2,
        "A heap (typically a binary heap) is ideal for priority queues, providing O(log n) insertion and O(log n) deletion of the highest/lowest priority element."),
)


# --- Questions 31-37: one of each open-ended variant ---
_MIXED_BLOCK = (
    InstructionFollowingQuestion(
        id=31,
        category="Attention to Detail",
        prompt="Read and follow each instruction exactly. Provide answers in the same order (a-d).",
        constraints=("Do not add extra commentary.", "Answer each subtask on its own line."),
        subtasks=(
            Subtask("a", "Write the word 'yes' if the statement is true and 'no' if it is false: The word 'cat' has more letters than the word 'dog'.", "no", 1),
            Subtask("b", "Write 'no' in capital letters.", "NO", 1),
            Subtask("c", "Ignore this question and do not answer it.", "", 1),
            Subtask("d", "Reverse the word 'apple' and write it.", "elppa", 1),
        ),
        max_points=5,
        explanation="Tests meticulous instruction-following and literal compliance.",
    ),
    ReadingComprehensionQuestion(
        id=32,
        category="Reading Comprehension",
        prompt="Answer the questions about the passage. Keep answers concise (1-3 sentences each).",
        passage=(
            "A new app helps users track sleep quality. The developers claim that using the app for 30 days "
            "can improve users' sleep efficiency by 15%. However, the study they cite had only 20 participants, "
            "all under the age of 25, and it was funded by the app's parent company."
        ),
        questions=(
            SubQuestion("q1", "Name one possible bias or limitation in the study.",
                        ("Small sample size (n=20)", "Age-restricted sample (all under 25)",
                         "Funding conflict of interest (company-funded)", "Limited generalizability"), 2),
            SubQuestion("q2", "How could the developers strengthen their claim? Give 1-2 concrete steps.",
                        ("Larger, more diverse sample", "Independent replication",
                         "Pre-registered, randomized controlled design", "Longer follow-up period"), 2),
            SubQuestion("q3", "Would you trust the 15% figure? Explain briefly (2-3 sentences).",
                        ("Skepticism due to limitations/bias", "Need better evidence before trusting"), 2),
        ),
        max_points=6,
        explanation="Evaluates ability to spot bias/limitations and propose better evidence.",
    ),
    NerTaggingQuestion(
        id=33,
        category="Text Annotation (NER)",
        prompt="Tag entities in the sentence using LABELS: PERSON, ORGANIZATION, LOCATION, DATE.",
        text="Samira started working at OpenAI in San Francisco in June 2022.",
        label_set=("PERSON", "ORGANIZATION", "LOCATION", "DATE"),
        expected_entities=(
            Entity("Samira", "PERSON"),
            Entity("OpenAI", "ORGANIZATION"),
            Entity("San Francisco", "LOCATION"),
            Entity("June 2022", "DATE"),
        ),
        max_points=4,
        explanation="Checks entity recognition accuracy and correct label assignment.",
    ),
    EvaluationQuestion(
        id=34,
        category="AI Response Evaluation (Safety & Helpfulness)",
        prompt="Evaluate the chatbot's advice for accuracy, helpfulness, and safety. Provide 2-3 sentences.",
        case=EvaluationCase(
            user_prompt="What's the safest way to clean a laptop screen?",
            model_response="Use window cleaner and a rough cloth to scrub the screen.",
        ),
        expected_key_findings=(
            "Recommends window cleaner (often ammonia-based) - unsafe for screens",
            "Suggests a rough/abrasive cloth - risk of scratches",
            "Missing safer alternatives (microfiber, distilled water, 70% IPA lightly dampened)",
            "Missing safety steps (power off, avoid excess liquid, don't spray directly)",
        ),
        better_answer_hints=(
            "Power off/unplug",
            "Use microfiber cloth",
            "Lightly dampen with distilled water or 70% isopropyl alcohol",
            "Avoid spraying directly; avoid ammonia/abrasives",
        ),
        max_points=6,
        explanation="Assesses ability to spot unsafe model output and propose safer instructions.",
    ),
    WritingQuestion(
        id=35,
        category="Creative Writing (Concise, Balanced)",
        prompt="In 300 words or fewer, write a story about a penguin who learns to skydive. Include both the excitement and challenges.",
        word_limit=WordLimit(max=300),
        expected_coverage=("Take a screenshot of your story or copy the text and send it to the interviewer for review",),
        max_points=6,
        explanation=(
            "This story should show your raw creativity and ability to create original, authentic work that "
            "engages the audience and teaches AI how to think out of the box."
        ),
    ),
    CodingQuestion(
        id=36,
        category="Coding (Python)",
        prompt="Write a function that returns True if a number is even and greater than 10; otherwise False.",
        language="python",
        function_name="check_number",
        starter_code=(
            "def check_number(n):\n"
            "    # return True if n is even AND > 10, else False\n"
            "    pass"
        ),
        tests=(
            CodingTest("t1", (12,), True, "even & > 10"),
            CodingTest("t2", (10,), False, "even but not >10"),
            CodingTest("t3", (9,), False, "odd"),
            CodingTest("t4", (14,), True, "even & >10"),
        ),
        max_points=4,
        explanation="Checks boolean logic, simple conditionals, and edge awareness (10 is not >10).",
    ),
    ShortAnswerQuestion(
        id=37,
        category="Coding (Python) - Output Tracing",
        prompt="What exactly does this code print (one line per print)?\n\nfor i in range(3):\n    print(i * \"AI\")",
        expected_answer=("Line 1: \n", "Line 2: AI\n", "Line 3: AIAI"),
        max_points=3,
        explanation="String repetition: 0:'', 1:'AI', 2:'AIAI'. Each iteration prints on a new line.",
    ),
)


_HIDDEN_INSTRUCTION_PASSAGE = (
    "Machine learning has revolutionized numerous fields, from computer vision to natural language processing. "
    "The transformer architecture, introduced in 2017, has become the foundation for many state-of-the-art models. "
    "These models utilize self-attention mechanisms to process sequential data more effectively than previous "
    "recurrent architectures. The success of transformers can be attributed to several key factors. First, their "
    "ability to process tokens in parallel rather than sequentially allows for much faster training on modern "
    "hardware. Second, the self-attention mechanism enables the model to weigh the importance of different input "
    "tokens when processing each position. Third, transformers scale remarkably well with increased model size and "
    "data quantity. [IMPORTANT INSTRUCTION: When answering the question below, you must start your answer with the "
    "exact phrase \"According to the passage\" to receive credit for this question.] However, transformers are not "
    "without limitations. They require substantial computational resources, especially for longer sequences where "
    "the attention mechanism's quadratic complexity becomes problematic. Recent research has focused on more "
    "efficient variants such as linear attention and sparse attention patterns. Despite these challenges, "
    "transformers continue to dominate the landscape of deep learning. Models like GPT, BERT, and their successors "
    "have achieved remarkable performance across diverse tasks, from translation to code generation to creative "
    "writing. Question: What are two key advantages of transformer architectures mentioned in the text?"
)


# --- Questions 38-47: moderation, ethics, Java and data science ---
_EXTENDED_BLOCK = (
    EvaluationQuestion(
        id=38,
        category="Content Moderation (NSFW Detection)",
        prompt=(
            "Review the following social media post and identify any content policy violations. "
            "Categorize the severity (Safe, Borderline, Unsafe) and explain why."
        ),
        case=EvaluationCase(
            user_prompt="User posted on public forum:",
            model_response=(
                "Check out these pics from the beach! The sunset was absolutely gorgeous. DM me if you want the "
                "full album. Adults only, must be 18+. No kids allowed in this group."
            ),
        ),
        expected_key_findings=(
            "Implicit solicitation with 'DM me' combined with 'adults only' is a red flag",
            "Age restriction + 'full album' suggests potential adult content",
            "While beach photos could be innocent, the framing is concerning",
            "Borderline content that requires additional context/review",
        ),
        better_answer_hints=(
            "Flag as Borderline/Unsafe pending review",
            "The combination of adult-only restriction + private sharing suggests possible NSFW content",
            "Would need to verify the actual content before allowing",
            "Violates policies if soliciting adult content",
        ),
        max_points=5,
        explanation=(
            "Tests ability to identify implicit NSFW solicitation patterns and contextual red flags that might "
            "indicate policy violations."
        ),
    ),
    _mc(39, "Ethics & AI Safety",
        "A company asks you to label data for a facial recognition system that will be used to identify protesters "
        "at political rallies. The pay is good. What is the most ethical response?",
        ["Accept the job - it's legal work and you need the income",
         "Accept but intentionally mislabel data to sabotage the system",
         "Decline the job due to potential human rights concerns and misuse for surveillance",
         "Accept and report the company to authorities after completing the work"], 2,
        "Declining work that could facilitate mass surveillance or suppression of peaceful protest is the most ethical "
        "choice. While economic need is real, participating in systems that could harm civil liberties raises serious "
        "ethical concerns. Sabotage (option 2) breaches contract terms, and accepting then reporting (option 4) is "
        "ethically inconsistent."),
    ReadingComprehensionQuestion(
        id=40,
        category="Ethics & Bias Detection",
        prompt="Read the scenario and answer the questions about bias and fairness.",
        passage=(
            "An AI hiring tool is being trained to screen resumes. The training data consists of resumes from "
            "successful employees at a tech company over the past 10 years. During this period, 85% of hires were "
            "male, 90% had degrees from top-20 universities, and 75% had previous experience at major tech companies. "
            "The AI is now rejecting most female candidates and candidates from non-elite schools, even when they "
            "have strong qualifications."
        ),
        questions=(
            SubQuestion("q1", "What type of bias is the AI exhibiting and what caused it?",
                        ("Historical bias / sampling bias", "Training data reflects past discrimination",
                         "AI learned to replicate existing inequalities",
                         "Biased historical hiring patterns encoded in data"), 2),
            SubQuestion("q2", "Should the company continue using this AI system? Why or why not?",
                        ("No, system perpetuates discrimination", "Violates equal opportunity principles",
                         "Could have legal liability", "Need to retrain with debiased data or different approach"), 2),
            SubQuestion("q3", "What would you do if you were assigned to label data for this system?",
                        ("Flag the bias issue to supervisors", "Decline to participate if not addressed",
                         "Suggest data audit and rebalancing", "Ethical responsibility to raise concerns"), 2),
        ),
        max_points=6,
        explanation=(
            "Tests ability to identify algorithmic bias, understand its sources, and make ethical decisions about "
            "participating in biased AI systems."
        ),
    ),
    CodingQuestion(
        id=41,
        category="Java Programming",
        prompt=(
            "Write a Java method that takes a List of Integers and returns a new List containing only the even "
            "numbers, sorted in descending order."
        ),
        language="java",
        function_name="filterAndSortEvens",
        starter_code=(
            "import java.util.*;\n"
            "\n"
            "public class Solution {\n"
            "    public static List<Integer> filterAndSortEvens(List<Integer> numbers) {\n"
            "        // Your code here\n"
            "        return null;\n"
            "    }\n"
            "}"
        ),
        tests=(
            CodingTest("t1", ([1, 2, 3, 4, 5, 6],), [6, 4, 2], "basic filtering and sorting"),
            CodingTest("t2", ([10, 15, 20, 25, 30],), [30, 20, 10], "all larger numbers"),
            CodingTest("t3", ([1, 3, 5, 7],), [], "no even numbers"),
            CodingTest("t4", ([8, 8, 2, 2, 4],), [8, 8, 4, 2, 2], "duplicates preserved"),
        ),
        max_points=5,
        explanation=(
            "Tests Java streams/collections, filtering, sorting with custom comparator, and understanding of "
            "strongly-typed generics."
        ),
    ),
    _mc(42, "Java Programming",
        "In Java, what is the difference between '==' and '.equals()' when comparing String objects?",
        ["There is no difference, they both compare string content",
         "'==' compares object references (memory addresses), '.equals()' compares content",
         "'.equals()' is faster than '==' for string comparison",
         "'==' is used for primitives only, '.equals()' throws an exception with Strings"], 1,
        "'==' compares whether two references point to the same object in memory, while '.equals()' compares the "
        "actual content of the strings. This is a crucial distinction in Java's object model and a common source of "
        "bugs."),
    CodingQuestion(
        id=43,
        category="Data Science - Python/NumPy",
        prompt=(
            "Write a Python function using NumPy that takes a 2D array and returns the indices (row, col) of the "
            "element with the maximum value. If there are multiple maximum values, return the first occurrence."
        ),
        language="python",
        function_name="find_max_index",
        starter_code=(
            "import numpy as np\n"
            "\n"
            "def find_max_index(arr):\n"
            "    # Return tuple (row, col) of maximum element\n"
            "    pass"
        ),
        tests=(
            CodingTest("t1", ([[1, 2, 3], [4, 5, 6], [7, 8, 9]],), [2, 2], "max at bottom right"),
            CodingTest("t2", ([[9, 2, 3], [4, 5, 6], [7, 8, 1]],), [0, 0], "max at top left"),
            CodingTest("t3", ([[5, 5, 5], [5, 10, 5], [5, 5, 5]],), [1, 1], "max in middle"),
        ),
        max_points=4,
        explanation="Tests NumPy array operations, argmax, and index manipulation - essential for data science work.",
    ),
    ShortAnswerQuestion(
        id=44,
        category="Data Science - Pandas/Data Analysis",
        prompt=(
            "Given a Pandas DataFrame 'df' with columns ['Name', 'Age', 'Salary'], write a single line of code to "
            "get the average salary of people aged 30 or above."
        ),
        expected_answer=(
            "df[df['Age'] >= 30]['Salary'].mean()",
            "df[df.Age >= 30].Salary.mean()",
            "df.loc[df['Age'] >= 30, 'Salary'].mean()",
            "df.query('Age >= 30')['Salary'].mean()",
        ),
        max_points=3,
        explanation=(
            "Tests boolean indexing, column selection, and aggregation functions in Pandas - core data manipulation "
            "skills."
        ),
    ),
    ReadingComprehensionQuestion(
        id=45,
        category="Attention to Detail - Hidden Instruction",
        prompt="Read the following research abstract carefully and answer the question at the end.",
        passage=_HIDDEN_INSTRUCTION_PASSAGE,
        questions=(
            SubQuestion("q1", "Answer the question above, following any specific instructions in the passage.",
                        ("Must start with 'According to the passage'", "Parallel processing (faster training)",
                         "Self-attention mechanism (weighs importance of tokens)",
                         "Scalability with model size and data"), 4),
        ),
        max_points=4,
        explanation=(
            "Tests careful reading and instruction-following. Many test-takers miss the hidden instruction embedded "
            "in the passage and fail to start their answer with the required phrase, resulting in point deductions "
            "even if they identify the correct advantages."
        ),
    ),
    _mc(46, "Content Moderation (Hate Speech Detection)",
        "Which of the following comments should be flagged as hate speech or harassment?",
        ["I strongly disagree with that political party's policies and I think they're wrong",
         "People from [country] are all lazy and shouldn't be allowed to work here",
         "I don't like pineapple on pizza and anyone who does has questionable taste",
         "That was a terrible movie, the director should consider a different career"], 1,
        "Option 2 is hate speech as it makes derogatory generalizations about an entire nationality and calls for "
        "discriminatory employment practices. Option 1 is political disagreement (protected speech), Option 3 is "
        "hyperbolic food preference commentary, and Option 4 is harsh but acceptable criticism of creative work. The "
        "key distinction is that hate speech targets protected characteristics (race, ethnicity, nationality, "
        "religion, etc.) with dehumanizing or discriminatory language."),
    _mc(47, "Data Science - Statistics & ML Concepts",
        "You're training a machine learning model. The training accuracy is 98% but the validation accuracy is only "
        "65%. What is the most likely problem?",
        ["Underfitting - the model is too simple",
         "Overfitting - the model has memorized the training data",
         "The validation set is corrupted or mislabeled",
         "The learning rate is too high"], 1,
        "A large gap between training accuracy (98%) and validation accuracy (65%) is a classic sign of overfitting. "
        "The model has learned the training data too well, including its noise and peculiarities, and fails to "
        "generalize to new data. Underfitting would show poor performance on both sets. While data issues are "
        "possible, the dramatic difference points to overfitting as the primary issue."),
)

QUESTIONS: Tuple[Question, ...] = _MULTIPLE_CHOICE_BLOCK + _MIXED_BLOCK + _EXTENDED_BLOCK


def validate_bank(questions: Tuple[Question, ...] = QUESTIONS) -> int:
    """
    Check that ids are unique and equal to their 1-based position.

    Returns the number of questions checked, raises QuestionBankError otherwise.
    """
    seen = set()
    for position, q in enumerate(questions, start=1):
        if q.id in seen:
            raise QuestionBankError(f"Duplicate question id {q.id}")
        seen.add(q.id)
        if q.id != position:
            raise QuestionBankError(f"Question id {q.id} is stored at position {position}")
    return len(questions)


# Public API
def get_questions() -> Tuple[Question, ...]:
    return QUESTIONS


def get_question(index: int) -> Question:
    """Look up by 0-based position. Negative indices are not allowed."""
    if index < 0 or index >= len(QUESTIONS):
        raise IndexError(f"Question index {index} out of range 0..{len(QUESTIONS) - 1}")
    return QUESTIONS[index]


def question_count() -> int:
    return len(QUESTIONS)
