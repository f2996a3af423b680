"""
Prompt templates for resume extraction and question generation.

This module contains all the prompt templates used by the pipelines,
keeping them separate from the business logic for easier maintenance and editing.
"""
from ..config import QUESTION_COUNT


class ResumePrompts:
    """Prompts for the model field extractor."""

    @staticmethod
    def system_instruction() -> str:
        return """
You are an expert resume parser with extensive experience in extracting candidate information from various resume formats. Your task is to accurately extract specific information from resume content.

CRITICAL INSTRUCTIONS:
1. DO NOT generate fake or placeholder information like "John Doe", "Jaden Smith", "example@email.com", etc.
2. ONLY extract information that is actually present in the resume content.
3. If you cannot find a specific piece of information, return an empty string for that field.
4. For PDF/DOCX files, the content may be base64 encoded - look for readable text patterns within the encoding.

EXTRACTION GUIDELINES:
- NAME: Look for patterns at the top of the document. Usually 2-3 words (First Last, or First Middle Last).
- EMAIL: Must contain @ symbol and domain. Look for patterns like name@company.com
- PHONE: Look for patterns with digits, hyphens, parentheses, spaces. Examples: (123) 456-7890, 123-456-7890, +1 123 456 7890
- ROLE: Look for job titles, positions, or "Professional Summary" sections. May include terms like "Software Engineer", "Developer", "Manager", etc.

Call extract_resume_info with the fields name, email, phone, role.
If any field is not found in the actual resume content, return an empty string for that field.
        """.strip()

    @staticmethod
    def user_message(text: str, declared_type: str, file_name: str, is_encoded: bool) -> str:
        return f"""
Parse this resume and extract: name, email, phone, and the role/position they are applying for or currently have.

File metadata:
- Type: {declared_type or 'unknown'}
- Name: {file_name or 'unknown'}
- Format: {'base64 encoded' if is_encoded else 'plain text'}

Resume content to analyze:
{text}

Remember: Extract ONLY what is actually present in the content. Do not generate or invent information.
        """.strip()


class QuestionPrompts:
    """Prompts for the question generator."""

    @staticmethod
    def system_instruction(subject_areas: str) -> str:
        return f"""
You are an expert React and Node.js technical interviewer. Generate exactly {QUESTION_COUNT} interview questions based ONLY on the subject areas below (no other topics).
STRICTLY FORBID generic questions like "What is your favorite programming language?", "Tell me about yourself", "Why do you want this job?", "What are your strengths/weaknesses?", or any non-technical questions.

Questions MUST be about:
{subject_areas}

EXAMPLES OF GOOD QUESTIONS:
Easy: "Explain the difference between useState and useReducer and when you would use each one."
Medium: "How would you optimize a React component that re-renders unnecessarily?"
Hard: "Explain the React reconciliation process and how keys affect it. What are the performance implications?"

AVOID THESE GENERIC PATTERNS:
- "What is your favorite...?"
- "Tell me about..."
- "Why do you want...?"
- "Describe your experience with..."

Call generate_questions with {QUESTION_COUNT} questions: exactly 2 easy, 2 medium, 2 hard, in that order.
        """.strip()

    @staticmethod
    def user_message(role: str, resume_context: str) -> str:
        return f"""
Role: {role or 'Not specified'}

Resume context: {resume_context or 'No resume provided'}

Generate 6 TECHNICAL interview questions only. No generic questions about preferences, personal background, or off-topic technologies. Questions must be answerable with code examples or technical explanations.
        """.strip()
