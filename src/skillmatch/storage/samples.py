"""内置示例职位：seed_dataset 脚本写入 .xlsx，memory 后端的参考数据集也以此为初始内容。"""
from skillmatch.matching.schemas import COLUMN_FRAMEWORKS, COLUMN_JOB_ROLE, COLUMN_SKILLS

SAMPLE_ROLES = [
    {COLUMN_JOB_ROLE: "Backend Developer", COLUMN_SKILLS: "Node, SQL, Python", COLUMN_FRAMEWORKS: "Express, Django"},
    {COLUMN_JOB_ROLE: "Frontend Developer", COLUMN_SKILLS: "JavaScript, TypeScript, HTML, CSS", COLUMN_FRAMEWORKS: "React, Vue"},
    {COLUMN_JOB_ROLE: "Data Scientist", COLUMN_SKILLS: "Python, R, SQL", COLUMN_FRAMEWORKS: "Pandas, Scikit-learn, TensorFlow"},
    {COLUMN_JOB_ROLE: "Mobile Developer", COLUMN_SKILLS: "Kotlin, Swift, Dart", COLUMN_FRAMEWORKS: "Flutter, React Native"},
    {COLUMN_JOB_ROLE: "DevOps Engineer", COLUMN_SKILLS: "Bash, Python, Go", COLUMN_FRAMEWORKS: "Docker, Kubernetes, Terraform"},
]
