"""Prompt templates for quiz generation and tutoring."""

from quizgen.models.schemas import AIChatRequest, AIHelpRequest, QuestionType, QuizRequest

QUIZ_SYSTEM_PROMPT = """You are an expert educational quiz generator. Your task is to create high-quality, pedagogically sound quiz questions from educational content.

Guidelines:
1. Each question must be clear, unambiguous, and directly related to the content
2. Questions should test understanding, not just memorization
3. For multiple-choice questions, create 4 plausible options with exactly one correct answer
4. Distractors (wrong options) should be plausible but clearly incorrect
5. Provide concise but thorough explanations for correct answers
6. Vary question difficulty according to the specified level
7. Cover diverse concepts from the content
8. Ensure questions are grammatically correct and professionally written

Output Format - Return a valid JSON object with this structure:
{
  "title": "Quiz title based on content",
  "description": "Brief description of what this quiz covers",
  "questions": [
    {
      "id": 1,
      "type": "multiple-choice|true-false|fill-in-blank",
      "difficulty": "easy|medium|hard",
      "topic": "Specific topic this question covers",
      "question": "The question text",
      "options": ["Option A", "Option B", "Option C", "Option D"],
      "correctAnswer": "The correct answer or option letter",
      "explanation": "Clear explanation of why this answer is correct"
    }
  ]
}
Include "options" only for multiple-choice questions."""

DIFFICULTY_GUIDELINES = """DIFFICULTY GUIDELINES:
- Easy: Basic recall, definitions, simple facts
- Medium: Application of concepts, understanding relationships
- Hard: Analysis, synthesis, complex problem-solving"""

QUESTION_TYPE_SPECS: dict[QuestionType, str] = {
    QuestionType.MULTIPLE_CHOICE: "- Multiple Choice: 4 options (A, B, C, D), one correct answer",
    QuestionType.TRUE_FALSE: "- True/False: Statement that is clearly true or false",
    QuestionType.FILL_IN_BLANK: (
        "- Fill in the Blank: Sentence with key term removed, indicated by _____"
    ),
    QuestionType.TOPIC_SPECIFIC: "- Topic-Specific: Deep questions on specific topics mentioned",
}


def build_quiz_prompt(request: QuizRequest, max_content_chars: int) -> str:
    """Build the user prompt for quiz generation.

    Args:
        request: Validated quiz parameters.
        max_content_chars: Content beyond this many characters is dropped.

    Returns:
        The prompt text.
    """
    types = ", ".join(t.value for t in request.question_types)

    requirements = [
        f"- Difficulty Level: {request.difficulty.value.upper()}",
        f"- Question Types: {types}",
    ]
    if request.specific_topics:
        requirements.append(f"- Focus on these topics: {', '.join(request.specific_topics)}")
    else:
        requirements.append("- Cover all major topics from the content")
    if request.prioritize_important:
        requirements.append("- Prioritize frequently mentioned and high-importance concepts")

    type_specs = [QUESTION_TYPE_SPECS[t] for t in QuestionType if t in request.question_types]

    return "\n".join(
        [
            f"Generate a quiz with exactly {request.number_of_questions} questions "
            "from the following educational content.",
            "",
            "REQUIREMENTS:",
            *requirements,
            "",
            DIFFICULTY_GUIDELINES,
            "",
            "QUESTION TYPE SPECIFICATIONS:",
            *type_specs,
            "",
            "EDUCATIONAL CONTENT:",
            "---",
            request.content[:max_content_chars],
            "---",
            "",
            f"Generate the quiz now. Ensure all {request.number_of_questions} questions are "
            "unique and well-distributed across the content. Return valid JSON only.",
        ]
    )


def build_topics_prompt(content: str, max_content_chars: int) -> str:
    """Build the topic analysis prompt."""
    return f"""Analyze the following educational content and identify the main topics, concepts, and key areas covered. Return a JSON object with:
- topics: array of main topic names
- keyConcepts: array of important concepts/definitions
- suggestedDifficulty: recommended difficulty level based on content complexity

Educational Content:
{content[:max_content_chars]}

Return valid JSON only."""


def build_help_prompt(request: AIHelpRequest) -> str:
    """Build the prompt asking for a beginner-friendly explanation."""
    topic_line = f"TOPIC: {request.topic}" if request.topic else ""

    return f"""You are a friendly and patient tutor helping a student understand a concept they got wrong on a quiz.

The student answered this question incorrectly and needs help understanding why the correct answer is right.

QUESTION: {request.question}

CORRECT ANSWER: {request.correct_answer}

STUDENT'S ANSWER: {request.user_answer or "(No answer provided)"}

ORIGINAL EXPLANATION: {request.explanation or ""}

{topic_line}

Please provide a detailed, easy-to-understand explanation that:
1. Starts with a friendly, encouraging tone
2. Explains the concept in simple terms, as if teaching a beginner
3. Uses real-world analogies or examples to make it relatable
4. Breaks down WHY the correct answer is right step by step
5. If the student gave a wrong answer, gently explains why that answer is incorrect
6. Provides a memory tip or trick to remember this concept
7. Ends with a brief summary

Use clear paragraphs and make it conversational. Don't use complex jargon."""


def build_tutor_system_prompt(request: AIChatRequest) -> str:
    """Build the system prompt that pins the tutor to one question."""
    return f"""You are a friendly, patient AI tutor helping a student understand a quiz question they got wrong or are confused about.

QUESTION CONTEXT:
- Question: {request.question}
- Correct Answer: {request.correct_answer}
- Topic: {request.topic or "General"}

GUIDELINES:
1. Be encouraging and supportive - never make the student feel bad
2. Explain concepts in simple terms
3. Use analogies and real-world examples
4. If they ask for more examples, provide different ones
5. If they're still confused, try a completely different approach
6. Keep responses conversational but educational
7. Use emojis occasionally to be friendly
8. If they understand, congratulate them!
9. Answer any follow-up questions they have about this topic

Remember: Your goal is to help them truly understand, not just memorize."""


def build_tutor_messages(request: AIChatRequest) -> list[dict[str, str]]:
    """Assemble the chat transcript sent to the model.

    Returns:
        System prompt, then prior turns in order, then the new user message.
    """
    messages = [{"role": "system", "content": build_tutor_system_prompt(request)}]
    messages.extend({"role": turn.role, "content": turn.content} for turn in request.chat_history)
    messages.append({"role": "user", "content": request.user_message})
    return messages
