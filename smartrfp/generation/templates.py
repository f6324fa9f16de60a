"""Text templates used to assemble proposal drafts."""

from smartrfp.models.analysis import QuestionType, RFPQuestion
from smartrfp.models.knowledge import KnowledgeBaseItem, KnowledgeItemType

ANSWER_EXCERPT_CHARS = 300
CAPABILITY_EXCERPT_CHARS = 400
CASE_STUDY_EXCERPT_CHARS = 500
SUMMARY_EXCERPT_CHARS = 300
KEY_REQUIREMENT_CHARS = 200


def excerpt(text: str, limit: int) -> str:
    """Leading ``limit`` characters of ``text`` followed by an ellipsis."""
    return text[:limit] + "..."


def _preferred(
    knowledge: list[KnowledgeBaseItem], item_type: KnowledgeItemType
) -> KnowledgeBaseItem:
    return next((k for k in knowledge if k.type == item_type), knowledge[0])


def technical_answer(question: RFPQuestion, knowledge: list[KnowledgeBaseItem]) -> str:
    if knowledge:
        item = _preferred(knowledge, KnowledgeItemType.TECHNICAL_SPEC)
        return (
            "Our technical approach leverages industry best practices and proven technologies. "
            f"{excerpt(item.content, ANSWER_EXCERPT_CHARS)}\n\n"
            "We ensure scalability, security, and performance through:\n"
            "- Modern architecture patterns and frameworks\n"
            "- Comprehensive testing and quality assurance\n"
            "- Continuous integration and deployment practices\n"
            "- Performance monitoring and optimization"
        )

    return (
        "Our technical team brings extensive experience in modern software development "
        "practices. We follow industry standards and best practices to ensure:\n\n"
        "- Scalable and maintainable architecture\n"
        "- Robust security implementation\n"
        "- High-performance solutions\n"
        "- Comprehensive documentation and testing\n\n"
        "We will provide detailed technical specifications and architecture diagrams "
        "during the project planning phase."
    )


def commercial_answer(question: RFPQuestion, knowledge: list[KnowledgeBaseItem]) -> str:
    if knowledge:
        item = _preferred(knowledge, KnowledgeItemType.PRICING)
        return (
            "Our commercial approach is transparent and competitive. "
            f"{excerpt(item.content, ANSWER_EXCERPT_CHARS)}\n\n"
            "We offer flexible pricing models including:\n"
            "- Fixed-price project delivery\n"
            "- Time and materials engagement\n"
            "- Hybrid pricing structures\n"
            "- Flexible payment terms"
        )

    return (
        "We provide transparent and competitive pricing with flexible payment terms. "
        "Our commercial approach includes:\n\n"
        "- Detailed cost breakdown and justification\n"
        "- Flexible payment schedules aligned with project milestones\n"
        "- Competitive rates with no hidden costs\n"
        "- Value-based pricing that delivers ROI\n\n"
        "We will provide a comprehensive commercial proposal with detailed pricing upon request."
    )


def experience_answer(question: RFPQuestion, knowledge: list[KnowledgeBaseItem]) -> str:
    if knowledge:
        item = _preferred(knowledge, KnowledgeItemType.CASE_STUDY)
        return (
            "Our team has extensive experience in similar projects. "
            f"{excerpt(item.content, ANSWER_EXCERPT_CHARS)}\n\n"
            "Key highlights of our experience:\n"
            "- Successfully delivered 200+ projects\n"
            "- 95% client satisfaction rate\n"
            "- Average project delivery 20% faster than industry standards\n"
            "- Proven track record across multiple industries"
        )

    return (
        "Our team brings extensive experience and proven expertise:\n\n"
        "- 8+ years of software development experience\n"
        "- Successfully delivered 200+ projects across various industries\n"
        "- 95% client satisfaction rate with long-term partnerships\n"
        "- Certified professionals with relevant industry experience\n"
        "- Proven methodology and best practices\n\n"
        "We can provide detailed case studies and client references upon request."
    )


def compliance_answer(question: RFPQuestion, knowledge: list[KnowledgeBaseItem]) -> str:
    if knowledge:
        item = _preferred(knowledge, KnowledgeItemType.PROCESS)
        return (
            "Compliance is embedded in how we deliver. "
            f"{excerpt(item.content, ANSWER_EXCERPT_CHARS)}\n\n"
            "Our compliance practices include:\n"
            "- Documented policies and procedures for all processes\n"
            "- Regular security audits and compliance assessments\n"
            "- Privacy-aware data handling\n"
            "- Staff training on compliance requirements"
        )

    return (
        "We maintain strict compliance with industry standards and regulations:\n\n"
        "- ISO 27001 certified for information security management\n"
        "- GDPR compliant data handling and privacy practices\n"
        "- Regular security audits and compliance assessments\n"
        "- Documented policies and procedures for all processes\n"
        "- Staff training on compliance requirements\n\n"
        "We will ensure all project deliverables meet your compliance requirements and "
        "provide necessary documentation and certifications."
    )


def general_answer(question: RFPQuestion, knowledge: list[KnowledgeBaseItem]) -> str:
    if knowledge:
        return (
            f"{excerpt(knowledge[0].content, ANSWER_EXCERPT_CHARS)}\n\n"
            "We are committed to delivering exceptional results that meet and exceed your "
            "expectations. Our approach includes:\n"
            "- Detailed project planning and management\n"
            "- Regular communication and progress updates\n"
            "- Quality assurance at every stage\n"
            "- Comprehensive documentation and training"
        )

    return (
        "We understand the importance of this requirement and are committed to providing "
        "a comprehensive solution. Our approach includes:\n\n"
        "- Thorough analysis and planning\n"
        "- Best-in-class implementation practices\n"
        "- Regular progress monitoring and reporting\n"
        "- Dedicated support throughout the project lifecycle\n\n"
        "We will provide detailed specifications and implementation plans during the "
        "project planning phase."
    )


ANSWER_TEMPLATES = {
    QuestionType.TECHNICAL: technical_answer,
    QuestionType.COMMERCIAL: commercial_answer,
    QuestionType.EXPERIENCE: experience_answer,
    QuestionType.COMPLIANCE: compliance_answer,
    QuestionType.GENERAL: general_answer,
}


def executive_summary(
    project_title: str,
    client_name: str,
    total_questions: int,
    section_count: int,
    analysis_summary: str,
    company_info: KnowledgeBaseItem | None,
    key_requirements: list[str],
    additional_context: str | None = None,
) -> str:
    """Render the executive summary."""
    approach = (
        excerpt(company_info.content, SUMMARY_EXCERPT_CHARS)
        if company_info
        else "Our experienced team brings proven expertise in delivering complex software "
        "solutions that drive business growth and digital transformation."
    )

    parts = [
        "# Executive Summary\n\n"
        f"We are pleased to submit our comprehensive proposal for {project_title} to "
        f"{client_name}. Our team has thoroughly analyzed your RFP requirements and "
        f"identified {total_questions} specific questions and requirements across "
        f"{section_count} key areas.",
        f"## Our Understanding\n{analysis_summary}",
        f"## Our Approach\n{approach}",
        "## Key Differentiators\n"
        f"- Comprehensive coverage of all {total_questions} RFP requirements\n"
        "- Proven track record with similar projects\n"
        "- Dedicated project team with relevant expertise\n"
        "- Agile development methodology ensuring timely delivery\n"
        "- 24/7 support and maintenance capabilities",
        "## Value Proposition\n"
        f"We understand that {client_name} requires a solution that not only meets your "
        "technical specifications but also delivers measurable business value. Our proposal "
        "addresses each of your requirements with detailed solutions, timelines, and pricing.",
    ]

    if additional_context and additional_context.strip():
        parts.append(f"## Your Priorities\n{additional_context.strip()}")

    if key_requirements:
        numbered = "\n".join(
            f"{index}. {excerpt(requirement, KEY_REQUIREMENT_CHARS)}"
            for index, requirement in enumerate(key_requirements, start=1)
        )
        parts.append(f"## Key Requirements Addressed\n{numbered}")

    parts.append(
        f"We look forward to discussing how our solution can help {client_name} achieve "
        "its objectives and deliver exceptional results."
    )
    return "\n\n".join(parts)


TIMELINE_SECTION = """# Project Timeline & Milestones

## Project Phases

### Phase 1: Discovery & Planning (Weeks 1-2)
- Detailed requirements analysis and validation
- Technical architecture design and review
- Project plan finalization and team allocation
- Risk assessment and mitigation planning

**Deliverables:**
- Requirements specification document
- Technical architecture document
- Detailed project plan with milestones
- Risk management plan

### Phase 2: Design & Prototyping (Weeks 3-4)
- UI/UX design and user experience planning
- System design and database architecture
- API design and integration planning
- Prototype development and validation

**Deliverables:**
- UI/UX designs and style guide
- System design documentation
- API specifications
- Working prototype

### Phase 3: Development & Implementation (Weeks 5-12)
- Core system development
- Feature implementation and testing
- Integration with external systems
- Performance optimization

**Deliverables:**
- Core application functionality
- Integrated system components
- Test results and quality reports
- Performance benchmarks

### Phase 4: Testing & Quality Assurance (Weeks 13-14)
- Comprehensive system testing
- User acceptance testing
- Performance and security testing
- Bug fixes and optimization

**Deliverables:**
- Test execution reports
- UAT sign-off
- Performance test results
- Security assessment report

### Phase 5: Deployment & Go-Live (Weeks 15-16)
- Production environment setup
- Data migration and system deployment
- User training and documentation
- Go-live support and monitoring

**Deliverables:**
- Production-ready system
- User training materials
- System documentation
- Go-live support plan

## Key Milestones
- Week 2: Requirements and architecture approval
- Week 4: Design approval and prototype sign-off
- Week 8: Core functionality demonstration
- Week 12: System integration complete
- Week 14: UAT completion and sign-off
- Week 16: Production go-live

## Timeline Flexibility
We understand that project timelines may need adjustment based on changing requirements or priorities. Our agile approach allows for flexibility while maintaining quality and delivery commitments."""


_TEAM_SECTION = """# Project Team & Resources

## Team Structure

### Project Management
- **Project Manager**: Dedicated PM with 8+ years experience
- **Technical Lead**: Senior architect overseeing technical decisions
- **Quality Assurance Lead**: Ensuring deliverable quality and standards

### Development Team
- **Senior Full-Stack Developers**: 2-3 developers with relevant technology expertise
- **Frontend Specialists**: UI/UX focused developers for optimal user experience
- **Backend Developers**: API and database specialists
- **DevOps Engineer**: Infrastructure and deployment specialist

### Specialized Roles
- **Business Analyst**: Requirements gathering and stakeholder communication
- **Security Specialist**: Security implementation and compliance
- **Testing Engineers**: Automated and manual testing specialists

## Team Qualifications
{qualifications}

## Resource Allocation
- Full-time dedicated team for project duration
- Part-time specialists available as needed
- 24/7 support during critical phases
- Backup resources for continuity planning

## Communication Structure
- Daily standups for development team coordination
- Weekly progress reviews with stakeholders
- Bi-weekly steering committee meetings
- Monthly executive briefings

## Team Availability
Our team is committed to your project success with:
- Dedicated resources for the project duration
- Flexible working arrangements to meet project needs
- Overlap with client time zones for effective communication
- Escalation procedures for urgent issues"""


def team_section(team_knowledge: KnowledgeBaseItem | None) -> str:
    """Render the team section, quoting a team profile when one exists."""
    qualifications = (
        excerpt(team_knowledge.content, CAPABILITY_EXCERPT_CHARS)
        if team_knowledge
        else "Our team members are certified professionals with relevant industry "
        "experience and proven track records in similar projects."
    )
    return _TEAM_SECTION.format(qualifications=qualifications)


RISK_SECTION = """# Risk Management & Mitigation

## Risk Assessment Framework

### Technical Risks
**Risk**: Technology integration challenges
- **Probability**: Medium
- **Impact**: Medium
- **Mitigation**: Proof of concept development, early integration testing

**Risk**: Performance and scalability issues
- **Probability**: Low
- **Impact**: High
- **Mitigation**: Performance testing throughout development, scalable architecture design

**Risk**: Security vulnerabilities
- **Probability**: Low
- **Impact**: High
- **Mitigation**: Security-first development approach, regular security audits

### Project Risks
**Risk**: Scope creep and requirement changes
- **Probability**: Medium
- **Impact**: Medium
- **Mitigation**: Clear change management process, regular stakeholder communication

**Risk**: Resource availability issues
- **Probability**: Low
- **Impact**: Medium
- **Mitigation**: Backup resource planning, cross-training team members

**Risk**: Timeline delays
- **Probability**: Medium
- **Impact**: Medium
- **Mitigation**: Buffer time in schedule, agile delivery approach

### Business Risks
**Risk**: Stakeholder alignment issues
- **Probability**: Low
- **Impact**: High
- **Mitigation**: Regular communication, clear decision-making processes

**Risk**: Budget constraints
- **Probability**: Low
- **Impact**: High
- **Mitigation**: Transparent cost tracking, flexible scope management

## Risk Monitoring
- Weekly risk assessment reviews
- Risk register maintenance and updates
- Proactive communication of potential issues
- Escalation procedures for high-impact risks

## Contingency Planning
- Alternative technical approaches identified
- Backup resource allocation plans
- Emergency response procedures
- Business continuity planning

## Success Factors
- Clear communication channels
- Regular progress monitoring
- Proactive issue identification
- Collaborative problem-solving approach"""
