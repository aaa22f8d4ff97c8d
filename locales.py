"""
Static string tables for the public site, English and Arabic.

Keys are dotted paths ("projects.empty"). Missing Arabic keys fall back to
English, and a key missing from both comes back unchanged.
"""

from typing import Any, Dict, Optional

from config import DEFAULT_LANGUAGE

SUPPORTED_LANGUAGES = ("en", "ar")
RTL_LANGUAGES = ("ar",)
FALLBACK_LANGUAGE = "en"

STRINGS: Dict[str, Dict[str, Any]] = {
    "en": {
        "common": {"admin": "Admin"},
        "nav": {
            "home": "Home",
            "about": "About",
            "projects": "Projects",
            "skills": "Skills",
            "testimonials": "Testimonials",
            "contact": "Contact",
        },
        "hero": {
            "name": "Magdy Elboushy",
            "title": "Futuristic Developer & Digital Architect",
            "description": "Crafting next-generation digital experiences with cutting-edge technology and innovative design solutions.",
            "exploreProjects": "EXPLORE PROJECTS",
            "downloadResume": "Download Resume",
        },
        "about": {
            "title": "ABOUT ME",
            "digitalInnovator": "Digital Innovator",
            "subtitle": "Pushing the boundaries of technology",
            "description1": "I am a passionate developer who specializes in creating futuristic digital experiences that blend cutting-edge technology with intuitive design.",
            "description2": "With expertise spanning from front-end frameworks to backend architectures, I craft solutions that are not just functional, but truly extraordinary.",
            "description3": "My mission is to push the boundaries of what's possible in web development, creating applications that feel like they're from the future.",
            "skills": {
                "fullStack": "Full-Stack Development",
                "performance": "Performance Optimization",
                "web": "Web Technologies",
                "architecture": "System Architecture",
            },
            "viewResume": "View Resume",
        },
        "projects": {
            "title": "FEATURED PROJECTS",
            "subtitle": "Explore my collection of futuristic applications and digital experiences",
            "liveDemo": "Live Demo",
            "code": "Code",
            "details": "Details",
            "empty": "No projects found. Visit the admin panel to add some!",
        },
        "skills": {
            "title": "SKILL MATRIX",
            "subtitle": "Interactive technology ecosystem showcasing my expertise",
        },
        "contact": {
            "title": "INITIATE CONTACT",
            "description1": "Ready to create something extraordinary? Let's collaborate on your next futuristic project.",
            "description2": "Whether you need a complete digital transformation or want to enhance your existing systems with cutting-edge technology, I'm here to help bring your vision to life.",
            "quickMessage": "Quick Message",
            "yourName": "Your Name",
            "yourEmail": "Your Email",
            "yourMessage": "Your Message",
            "transmitMessage": "TRANSMIT MESSAGE",
            "sending": "SENDING...",
            "communicationHub": "Communication Hub",
            "selectChannel": "Select your preferred transmission channel",
            "status": "STATUS: ONLINE",
            "responseTime": "RESPONSE_TIME: < 24H",
            "sent": "Message sent successfully!",
            "failed": "Failed to send message. Please try again.",
        },
        "footer": {
            "copyright": "© 2024 Alex Nova. Crafted with futuristic technology.",
            "systemStatus": "SYSTEM_STATUS: ONLINE",
        },
        "testimonials": {
            "title": "CLIENT TESTIMONIALS",
            "subtitle": "What clients say about my work and digital solutions",
            "empty": "No testimonials yet.",
            "loadError": "Could not load testimonials",
        },
        "loader": {"initializing": "INITIALIZING SYSTEMS"},
        "projectDetail": {
            "backToHome": "Back to Home",
            "backToProjects": "Back to Projects",
            "projectNotFound": "Project not found",
            "gallery": "Gallery",
            "aboutThisProject": "About This Project",
            "keyFeatures": "Key Features",
            "advantages": "Advantages",
            "challenges": "Challenges",
            "technologiesUsed": "Technologies Used",
        },
        "theme": {"light": "Light Mode", "dark": "Dark Mode"},
        "language": {"english": "English", "arabic": "العربية"},
    },
    "ar": {
        "common": {"admin": "لوحة الإدارة"},
        "nav": {
            "home": "الرئيسية",
            "about": "نبذة",
            "projects": "المشاريع",
            "skills": "المهارات",
            "testimonials": "الشهادات",
            "contact": "التواصل",
        },
        "hero": {
            "name": "مجدي البوشي",
            "title": "مطور مستقبلي ومعماري رقمي",
            "description": "صناعة تجارب رقمية من الجيل القادم باستخدام التكنولوجيا المتطورة وحلول التصميم المبتكرة.",
            "exploreProjects": "استكشاف المشاريع",
            "downloadResume": "تحميل السيرة الذاتية",
        },
        "about": {
            "title": "نبذة عني",
            "digitalInnovator": "مبتكر رقمي",
            "subtitle": "دفع حدود التكنولوجيا",
            "description1": "أنا مطور شغوف متخصص في إنشاء تجارب رقمية مستقبلية تمزج بين التكنولوجيا المتطورة والتصميم البديهي.",
            "description2": "مع خبرة تمتد من أطر العمل الأمامية إلى معماريات الخلفية، أصنع حلولاً ليست فقط وظيفية، بل استثنائية حقاً.",
            "description3": "مهمتي هي دفع حدود ما هو ممكن في تطوير الويب، وإنشاء تطبيقات تبدو وكأنها من المستقبل.",
            "skills": {
                "fullStack": "تطوير الشامل",
                "performance": "تحسين الأداء",
                "web": "تقنيات الويب",
                "architecture": "معمارية النظام",
            },
            "viewResume": "عرض السيرة الذاتية",
        },
        "projects": {
            "title": "المشاريع المميزة",
            "subtitle": "استكشف مجموعتي من التطبيقات المستقبلية والتجارب الرقمية",
            "liveDemo": "عرض مباشر",
            "code": "الكود",
            "details": "تفاصيل",
            "empty": "لا توجد مشاريع. قم بزيارة لوحة الإدارة لإضافة بعض المشاريع!",
        },
        "skills": {
            "title": "مصفوفة المهارات",
            "subtitle": "نظام تكنولوجي تفاعلي يعرض خبرتي",
        },
        "contact": {
            "title": "بدء التواصل",
            "description1": "مستعد لإنشاء شيء استثنائي؟ دعنا نتعاون في مشروعك المستقبلي القادم.",
            "description2": "سواء كنت تحتاج إلى تحول رقمي كامل أو تريد تعزيز أنظمتك الحالية بالتكنولوجيا المتطورة، أنا هنا لمساعدتك في تحقيق رؤيتك.",
            "quickMessage": "رسالة سريعة",
            "yourName": "اسمك",
            "yourEmail": "بريدك الإلكتروني",
            "yourMessage": "رسالتك",
            "transmitMessage": "إرسال الرسالة",
            "sending": "جاري الإرسال...",
            "communicationHub": "مركز الاتصالات",
            "selectChannel": "اختر قناة الإرسال المفضلة لديك",
            "status": "الحالة: متصل",
            "responseTime": "وقت_الاستجابة: < 24ساعة",
        },
        "footer": {
            "copyright": "© 2024 أليكس نوفا. صُنع بالتكنولوجيا المستقبلية.",
            "systemStatus": "حالة_النظام: متصل",
        },
        "testimonials": {
            "title": "شهادات العملاء",
            "subtitle": "ما يقوله العملاء عن عملي والحلول الرقمية",
            "empty": "لا توجد شهادات حتى الآن.",
            "loadError": "تعذر تحميل الشهادات",
        },
        "loader": {"initializing": "جارٍ تهيئة الأنظمة"},
        "projectDetail": {
            "backToHome": "العودة إلى الصفحة الرئيسية",
            "backToProjects": "العودة إلى المشاريع",
            "projectNotFound": "المشروع غير موجود",
            "gallery": "المعرض",
            "aboutThisProject": "نبذة عن المشروع",
            "keyFeatures": "أهم الميزات",
            "advantages": "المزايا",
            "challenges": "التحديات",
            "technologiesUsed": "التقنيات المستخدمة",
        },
        "theme": {"light": "الوضع المضيء", "dark": "الوضع المظلم"},
        "language": {"english": "English", "arabic": "العربية"},
    },
}


def normalize_language(lang: Optional[str]) -> Optional[str]:
    if not lang:
        return None
    lang = lang.strip().lower()[:2]
    return lang if lang in SUPPORTED_LANGUAGES else None


def resolve_language(*candidates: Optional[str]) -> str:
    """First supported candidate wins (query param, cookie...), else the default."""
    for candidate in candidates:
        lang = normalize_language(candidate)
        if lang:
            return lang
    return normalize_language(DEFAULT_LANGUAGE) or FALLBACK_LANGUAGE


def direction(lang: str) -> str:
    return "rtl" if lang in RTL_LANGUAGES else "ltr"


def _lookup(table: Dict[str, Any], key: str) -> Optional[Any]:
    node: Any = table
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node


def t(lang: str, key: str) -> Any:
    value = _lookup(STRINGS.get(lang, {}), key)
    if value is None:
        value = _lookup(STRINGS[FALLBACK_LANGUAGE], key)
    return key if value is None else value


def section(lang: str, name: str) -> Dict[str, Any]:
    """A whole section's strings, English filling any Arabic gaps."""
    merged = dict(STRINGS[FALLBACK_LANGUAGE].get(name, {}))
    merged.update(STRINGS.get(lang, {}).get(name, {}))
    return merged
