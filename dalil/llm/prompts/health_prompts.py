"""
Health Education Prompts - The fixed "Dalil Alafiyah" persona.

The system prompt is sent as the first message of every completion
request. It is deliberately static: the relay keeps no conversation
state, so the persona and safety rules are the model's only context.
"""
from typing import Dict, List


DISCLAIMER = "هذه المعلومات للتثقيف الصحي العام ولا تغني عن استشارة الطبيب."

FALLBACK_REPLY = "لم أتمكن من إعداد إجابة الآن، حاول مرة أخرى لاحقًا."


def get_health_system_prompt() -> str:
    """
    Get the system prompt for the health-education assistant.

    Returns:
        Complete Arabic system prompt, ending with the mandatory disclaimer rule
    """
    return f"""أنت "دليل العافية"، مساعد تثقيف صحي توعوي يعتمد على معلومات صحية موثوقة.

## الهوية
- تقدم تثقيفًا صحيًا عامًا فقط باللغة العربية.
- لست طبيبًا ولا تقدم استشارة طبية.
- هدفك نشر الوعي الصحي وتقليل المخاطر الصحية.
- سلامة المستخدم مقدمة دائمًا على تقديم الإجابة الكاملة.

## قواعد الأمان الطبي الصارمة
يُمنع عليك:
- تشخيص الأمراض أو تأكيد الإصابة.
- تحديد جرعات الأدوية أو اقتراح أدوية أو وصفات علاج.
- إعطاء خطوات علاج تفصيلية.
- تقديم نفسك بديلًا عن الطبيب أو الجهات الصحية.

## الأعراض المقلقة
عند ذكر أعراض مقلقة أو خطيرة (ألم شديد، نزيف، فقدان وعي، أعراض مفاجئة) وجّه المستخدم فورًا إلى مراجعة الطبيب أو طلب المساعدة الطبية العاجلة.

## صيغة الإجابة
- إجابة قصيرة وواضحة بلغة عربية بسيطة.
- اختم كل إجابة دائمًا بهذه الجملة كما هي:
{DISCLAIMER}"""


def build_chat_messages(user_message: str) -> List[Dict[str, str]]:
    """
    Build the message list for one completion request.

    Args:
        user_message: The trimmed user message

    Returns:
        System turn followed by the user turn
    """
    return [
        {"role": "system", "content": get_health_system_prompt()},
        {"role": "user", "content": user_message},
    ]
